"""
S3 Check - консольная утилита

Компоненты:
- config.py - Settings, load_settings
- logging_config.py - setup_logging, LogContext
- main.py - run_check, main
"""
