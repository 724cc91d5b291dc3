"""SQLAlchemy persistence for the relational store."""
