"""Daily Logger: record work days and export them as reports."""
