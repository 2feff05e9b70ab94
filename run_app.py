#!/usr/bin/env python
"""Entry point for the Dash dynamic clustering app.

Usage
-----
    python run_app.py [--port 8050] [--max-components 9] [--debug]
"""

from __future__ import annotations

import argparse
import logging

from dynamic_clustering import config
from dynamic_clustering.oracle import GaussianMixtureOracle


def main() -> None:
    parser = argparse.ArgumentParser(description="Launch the dynamic clustering web app")
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=8050,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--max-components", type=int, default=config.MAX_COMPONENTS,
        help=f"Largest number of mixture components tried (default: {config.MAX_COMPONENTS})",
    )
    parser.add_argument(
        "--seed", type=int, default=config.RANDOM_STATE,
        help=f"Random state for mixture initialisation (default: {config.RANDOM_STATE})",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Run Dash in debug mode",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    oracle = GaussianMixtureOracle(
        max_components=args.max_components,
        random_state=args.seed,
    )

    print(f"Starting Dash app on http://{args.host}:{args.port}/")

    from dynamic_clustering.app import create_app
    app = create_app(oracle)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
