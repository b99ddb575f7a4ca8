"""IndiaAura: browse India's cultural heritage by state and region."""
