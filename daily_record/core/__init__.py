"""
Core services: storage, layout, statistics and import/export
"""
