#!/usr/bin/env python3
"""
Favorite Places - Run Script
This script starts the places server in the foreground
"""

import sys
import socket

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_port_open(host, port):
    """Check if a port is open"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.settimeout(2)
    result = sock.connect_ex((host, port))
    sock.close()
    return result == 0

def main():
    from favorite_places.core.config import settings
    from favorite_places.core.errors import DatasetError, ServiceStateError
    from favorite_places.core.server import places_server
    from favorite_places.repos.dataset_loader import dataset_path

    print_colored("🚀 Starting Favorite Places server...", "blue")

    source = dataset_path()
    if not source.exists():
        print_colored(f"❌ Error: dataset not found at {source}", "red")
        sys.exit(1)

    if check_port_open(settings.SERVER_HOST, settings.SERVER_PORT):
        try:
            if places_server.is_running(wait=False):
                print_colored(f"✅ Favorite Places is already running at {settings.server_url}", "green")
                return
        except ServiceStateError as e:
            print_colored(f"❌ Error: {e}", "red")
            sys.exit(1)

    import uvicorn
    from favorite_places.main import create_app

    try:
        app = create_app()
    except DatasetError as e:
        print_colored(f"❌ Error loading dataset: {e}", "red")
        sys.exit(1)

    print(f"📍 Places will be available at: {settings.server_url}/places")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
    except KeyboardInterrupt:
        print_colored("\n👋 Favorite Places server stopped.", "yellow")

if __name__ == "__main__":
    main()
