#!/usr/bin/env python3
"""Resolve location, weather, events and movies for one place, for debugging."""

import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app

if __name__ == '__main__':
    if len(sys.argv) < 2:
        print("Usage: resolve_once.py <place name>")
        sys.exit(1)

    place = ' '.join(sys.argv[1:])
    app = create_app()
    client = app.test_client()

    resp = client.get('/location', query_string={'data': place})
    print(f"/location -> {resp.status_code}")
    if resp.status_code != 200:
        sys.exit(1)

    location = resp.get_json()
    print(json.dumps(location, indent=2))

    for route in ('/weather', '/events', '/movies'):
        resp = client.get(route, query_string={'data': json.dumps(location)})
        print(f"{route} -> {resp.status_code}")
        print(json.dumps(resp.get_json(), indent=2))
