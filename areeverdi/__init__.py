"""Sistema Gestione Aree Verdi: JSON-backed CRUD API for green area records."""
