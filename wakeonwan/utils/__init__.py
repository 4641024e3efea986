"""Pure helpers: MAC parsing and magic packet construction."""
