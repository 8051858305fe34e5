"""HTTP routers for the todo and weather endpoints."""
