"""REST routers for companies, jobs and users."""
