#!/usr/bin/env python3
"""
Simple HTTP server to serve a generated wiki.
Run this after build_wiki.py so the browser loads bundle.js over http.
"""

import functools
import http.server
import socketserver
import sys
import webbrowser
from pathlib import Path


def make_handler(wiki_dir: Path):
    return functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(wiki_dir))


def serve_wiki(wiki_dir=".", port=8000, open_browser=True):
    wiki_path = Path(wiki_dir)
    if not (wiki_path / "index.html").exists():
        print(f"No index.html in '{wiki_dir}'. Run build_wiki.py first.")
        return

    with socketserver.TCPServer(("", port), make_handler(wiki_path)) as httpd:
        url = f"http://localhost:{port}"
        print(f"Serving wiki at {url}")
        print("Press Ctrl+C to stop")

        if open_browser:
            webbrowser.open(url)

        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")


if __name__ == "__main__":
    wiki_dir = sys.argv[1] if len(sys.argv) > 1 else "."
    port = 8000
    if len(sys.argv) > 2:
        try:
            port = int(sys.argv[2])
        except ValueError:
            pass
    serve_wiki(wiki_dir, port=port)
