"""Transfer eligibility scoring: engine, ORM models and API routes."""
