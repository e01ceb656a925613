# main.py

import json
import logging
import sys
import logger_setup
import numpy as np
from engine import Engine

# Get the application's dedicated logger
logger = logging.getLogger("fireworks")

FRONTENDS = ('terminal', 'window')


def load_config(path='config.json'):
    """Loads the run configuration (seed, front end, logging)."""
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logger.error(f"Error decoding JSON from {path}.")
        raise


def run_frontend(name, engine):
    """
    Imports and runs the selected front end. Imports are deferred so the
    terminal front end does not require pygame and vice versa.
    """
    if name == 'terminal':
        from terminal import run_terminal
        run_terminal(engine)
    elif name == 'window':
        from window import run_window
        run_window(engine)
    else:
        raise ValueError(f"Unknown frontend '{name}', expected one of {FRONTENDS}.")


def main(config_path='config.json'):
    """
    Main function to initialize the engine and hand it to the configured
    front end. Returns the process exit status.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)
    config = load_config(config_path)

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    seed = config.get('master_seed')
    rng = np.random.default_rng(seed)
    logger.info(f"Master RNG initialized with seed: {seed}")

    frontend = config.get('frontend', 'terminal')
    if frontend not in FRONTENDS:
        raise ValueError(f"Unknown frontend '{frontend}', expected one of {FRONTENDS}.")

    engine = Engine(rng)

    try:
        run_frontend(frontend, engine)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    except Exception as e:
        # Terminal or window initialization failures end up here; the
        # engine state is discarded.
        logger.exception(f"Frontend '{frontend}' failed: {e}")
        return 1

    logger.info(
        f"Application shutting down after {engine.tick_count} ticks "
        f"and {engine.explosion_count} explosions."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
