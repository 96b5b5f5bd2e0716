"""Content transformation pipeline: parsing, link resolution, indexing, plugins"""
