"""
Parsing pipeline and Angular code generation for JDL models.

Architecture:
    - extractors/: enum, entity and relationship extraction, type mapping
    - builders/: render contexts joining the extracted model
    - generators/: Jinja rendering of entity and enum files
    - utils/: naming helpers (case conversion, pluralization)
"""
