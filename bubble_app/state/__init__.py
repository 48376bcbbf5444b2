"""
View state and timer lifecycle for the dashboard charts.
"""
