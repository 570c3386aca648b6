"""
Main entry point for the ChooJobs web client.

Usage:
    python main.py [--host HOST] [--port PORT] [--debug] [--config config.json]
"""

import argparse

from choojobs.config.settings import get_settings
from choojobs.web import create_app


def main():
    """
    Main application entry point with web UI.
    """
    parser = argparse.ArgumentParser(description="ChooJobs web client")
    parser.add_argument("--host", help="Interface to bind (default from HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default from PORT)")
    parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode")
    parser.add_argument("--config", help="Optional JSON settings file")
    args = parser.parse_args()

    settings = get_settings(args.config)
    app = create_app(settings)

    host = args.host or settings.host
    port = args.port or settings.port

    print("\n" + "="*70)
    print(f"💼 {settings.app_name.upper()} - WEB UI")
    print("="*70)
    print(f"🔗 API: {settings.api_base_url}")
    print(f"🌐 Opening web UI at http://localhost:{port}")
    print(f"   Press Ctrl+C to stop\n")
    app.run(debug=args.debug or settings.debug, host=host, port=port, use_reloader=False)


if __name__ == "__main__":
    main()
