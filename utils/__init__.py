# Shared helpers for the B2B marketplace backend
