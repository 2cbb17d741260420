"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".

Layout:
    coffeeshops/{coffeeshop_id}
    coffeeshops/{coffeeshop_id}/tasks/{task_id}
    coffeeshops/{coffeeshop_id}/task_results/{task_id}_{YYYY-MM-DD}
    users/{uid}
"""

COLLECTION_COFFEESHOPS = "coffeeshops"
COLLECTION_USERS = "users"

# Nested under a coffeeshop document.
SUBCOLLECTION_TASKS = "tasks"
SUBCOLLECTION_TASK_RESULTS = "task_results"

# Capitalized profile collection written by early client builds. Read only by
# scripts.migrate_legacy_profiles; the application reads COLLECTION_USERS.
LEGACY_COLLECTION_USERS = "Users"
