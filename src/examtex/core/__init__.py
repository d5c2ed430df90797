"""
examtex core: models, schemas and utilities shared by the builder.
"""
