"""
Feature modules.

- gpx: track model, GPX parsing/generation, file export
- elevation: elevation profile, grade classification, rendering data
"""
