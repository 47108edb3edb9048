# run.py - Development entry point

from dotenv import load_dotenv
import os

# MUST BE FIRST: Load .env BEFORE any imports from 'adminportal'
load_dotenv(override=True)

if not os.getenv('SECRET_KEY'):
    print("❌ SECRET_KEY is MISSING! Check your .env file path/content.")

print(f"🔐 CREDENTIAL_VERIFIER: {os.getenv('CREDENTIAL_VERIFIER') or 'plain (default)'}")

# NOW import from adminportal (after env vars are loaded)
from adminportal import create_app, db

app = create_app()

if __name__ == '__main__':
    with app.app_context():
        db.create_all()  # Create tables if needed

    app.run(
        debug=True,
        host='0.0.0.0',
        port=5000
    )
