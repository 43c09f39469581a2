from .assignment_ledger import AssignmentLedger
from .credential_store import CredentialStore, hash_password, verify_password
from .skill_catalog import SkillCatalog

__all__ = [
    "AssignmentLedger",
    "CredentialStore",
    "SkillCatalog",
    "hash_password",
    "verify_password",
]
