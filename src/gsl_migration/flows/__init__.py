"""
Prefect flows for the site pipeline.

Flows:
- build: Load climate and observation datasets, write chart payloads under
  ``derived/charts/`` and render the static page

Usage (local):
    python -m gsl_migration.flows.build
    gsl-migration build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-site/default'
"""
