# logger_setup.py

import logging
import os
import json

def setup_logging(config_path='config.json'):
    """
    Sets up logging for the application.

    Reads logging configuration, creates a run-specific log directory, and
    configures a dedicated application logger (not the root logger) that
    writes to a log file and, optionally, to the console. The curses front
    end owns the terminal, so console output is switched off for it through
    the 'console' key.

    Data Contract:
    - Inputs: config_path (str) - Path to the configuration file.
    - Outputs: logging.Logger - The configured "fireworks" logger.
    - Side Effects:
        - Configures the "fireworks" logger.
        - Creates directories for log files.
    - Invariants: Assumes the config file contains 'run_id' and a 'logging' dictionary
      with 'level' and 'format'. 'console' is optional and defaults to True.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config['logging']

    # --- Get a dedicated logger for the application ---
    logger = logging.getLogger("fireworks")
    logger.setLevel(log_config['level'])

    # --- Prevent logs from propagating to the root logger ---
    logger.propagate = False

    # --- Create directories for logs ---
    log_dir = os.path.join('runs', run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'fireworks.log')

    # --- Create formatter and handlers ---
    formatter = logging.Formatter(log_config['format'])

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if log_config.get('console', True):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
