from __future__ import annotations

import os


# The starter config references the admin password through ${LDAP_ADMIN_PASSWORD}
# with no default, so default-config test runs need a value in the environment.
os.environ.setdefault("LDAP_ADMIN_PASSWORD", "unit-test-admin-password")
