"""Infrastructure - async database session management and structured logging."""
