#!/usr/bin/env python
"""Entry point for the Dash scatter viewer.

Usage
-----
    python run_app.py [--data-dir data] [--dataset data1]

Render the initial dataset to a PNG instead of serving:
    python run_app.py --export scene.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from scatter_viewer.config import ViewerConfig
from scatter_viewer.explorer import ViewerSession
from scatter_viewer.io import DatasetLoadError


def main() -> None:
    parser = argparse.ArgumentParser(description="Launch the scatter viewer web app")
    parser.add_argument(
        "--data-dir", default="data",
        help="Directory holding <dataset>.csv files (default: data)",
    )
    parser.add_argument(
        "--dataset", default="data1",
        help="Dataset key shown first (default: data1)",
    )
    parser.add_argument(
        "--host", default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port", type=int, default=8050,
        help="Port to serve on (default: 8050)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Run Dash in debug mode",
    )
    parser.add_argument(
        "--export", metavar="PNG", default=None,
        help="Write the initial scene to a PNG file and exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log state transitions",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(name)s: %(message)s")

    config = ViewerConfig(data_dir=Path(args.data_dir), initial_dataset=args.dataset)
    session = ViewerSession(config)

    if args.export:
        try:
            session.load(args.dataset)
        except DatasetLoadError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        from scatter_viewer.visualization.export import export_png
        export_png(session, args.export)
        return

    print(f"Starting Dash app on http://{args.host}:{args.port}/")

    from scatter_viewer.app import create_app
    app = create_app(session)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
