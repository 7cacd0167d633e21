"""Services for talking to the hosted analysis model."""
