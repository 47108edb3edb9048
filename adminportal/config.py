"""
Admin Portal Configuration
Fixed settings shared by the login surface and the dashboard gate
"""

# Document store
ADMIN_COLLECTION = 'adminlogin'

# Client storage keys (kept identical to the browser build so old cookies parse)
SESSION_KEY = 'adminUser'
EXPIRY_KEY = 'adminTokenExpiry'

# Session settings
SESSION_LIFETIME_MS = 30 * 24 * 60 * 60 * 1000  # 30 days

# Login surface
LOGIN_REDIRECT_DELAY_MS = 1000  # pause before jumping to the dashboard
MIN_PASSWORD_LENGTH = 6

# Credential verifiers accepted by CREDENTIAL_VERIFIER
VERIFIERS = ('plain', 'hashed')
DEFAULT_VERIFIER = 'plain'

# Blueprint endpoints the components navigate to
LOGIN_ROUTE = 'auth.login'
DASHBOARD_ROUTE = 'dashboard.dashboard_view'
