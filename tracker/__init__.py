"""
Core package for the calorie tracker client.

This package contains:
- config: Environment loading and logging setup
- models: Entry and draft schemas
- api_client: Backend REST communication
- sync: Entry synchronization controller and row views
- summary: KPI totals for the entry list
"""
