"""Dogs API: CRUD service for the dog resource."""
