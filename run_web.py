#!/usr/bin/env python3
"""
Run script for the PageSift HTTP API.
"""

import argparse

from pagesift.web.app import create_app


def main():
    parser = argparse.ArgumentParser(description='PageSift HTTP API')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--data-dir', help='Data directory path')

    args = parser.parse_args()

    app = create_app(data_dir=args.data_dir, debug=args.debug)

    print("Starting PageSift API...")
    print(f"Host: {args.host}")
    print(f"Port: {args.port}")
    print(f"Debug: {args.debug}")
    if args.data_dir:
        print(f"Data directory: {args.data_dir}")
    print(f"\nSubmit searches to: http://{args.host}:{args.port}/api/search")
    print("Press Ctrl+C to stop")

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=args.debug
        )
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == '__main__':
    main()
