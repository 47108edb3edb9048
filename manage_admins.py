"""
Out-of-band management of the `adminlogin` collection.

    python manage_admins.py create
    python manage_admins.py list
    python manage_admins.py reset-password admin@example.com
"""
import argparse
import getpass
import sys

from dotenv import load_dotenv

load_dotenv(override=True)

from adminportal import create_app, db
from adminportal.config import ADMIN_COLLECTION, MIN_PASSWORD_LENGTH
from adminportal.credentials import AdministratorRecord
from adminportal.documents import SqlDocumentStore
from adminportal.errors import StoreError
from adminportal.services import credential_verifier


def _ask_password():
    # getpass hides what you type so it doesn't show on screen
    password = getpass.getpass("Enter New Password: ")
    confirm = getpass.getpass("Confirm Password: ")

    if password != confirm:
        print("❌ Passwords do not match!")
        return None
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"❌ Password should be at least {MIN_PASSWORD_LENGTH} characters long")
        return None
    return password


def _find(store, email):
    for doc in store.list_all(ADMIN_COLLECTION):
        record = AdministratorRecord.from_document(doc)
        if record.email_matches(email):
            return record
    return None


def create_admin(store):
    print("\n--- SETUP ADMIN USER ---")
    email = input("Enter Admin Email: ").strip()
    if not email:
        print("❌ Email is required.")
        return 1
    if _find(store, email):
        print(f"ℹ️ Admin {email} already exists.")
        return 1

    name = input("Display Name (default: Admin): ").strip() or 'Admin'
    role = input("Role (default: admin): ").strip() or 'admin'
    password = _ask_password()
    if password is None:
        return 1

    admin_id = store.add(ADMIN_COLLECTION, {
        'email': email,
        'name': name,
        'role': role,
        'password': credential_verifier().prepare(password),
    })
    print(f"✅ Admin '{email}' created (id {admin_id})")
    return 0


def list_admins(store):
    docs = store.list_all(ADMIN_COLLECTION)
    if not docs:
        print("ℹ️ No admin users yet. Run: python manage_admins.py create")
        return 0
    for doc in docs:
        record = AdministratorRecord.from_document(doc)
        print(f"   - {record.email}  {record.name}  ({record.role})  [{record.id}]")
    return 0


def reset_password(store, email):
    print(f"🔍 Looking for admin '{email}'...")
    record = _find(store, email)
    if record is None:
        print(f"❌ Admin '{email}' not found!")
        return 1

    password = _ask_password()
    if password is None:
        return 1

    store.update_by_id(ADMIN_COLLECTION, record.id,
                       {'password': credential_verifier().prepare(password)})
    print(f"🚀 Password for '{record.email}' has been reset.")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Manage admin portal accounts")
    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('create', help="create an admin account")
    sub.add_parser('list', help="list admin accounts")
    reset = sub.add_parser('reset-password', help="set a new password for an admin")
    reset.add_argument('email')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        db.create_all()
        store = SqlDocumentStore()
        try:
            if args.command == 'create':
                return create_admin(store)
            if args.command == 'list':
                return list_admins(store)
            return reset_password(store, args.email)
        except StoreError as e:
            print(f"❌ Error: {e.message}")
            return 1


if __name__ == '__main__':
    sys.exit(main())
