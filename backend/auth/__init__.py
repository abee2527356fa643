"""JWT authentication and route guards."""
