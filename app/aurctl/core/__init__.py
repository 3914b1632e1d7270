"""Core reconciliation and orchestration logic for aurctl."""
