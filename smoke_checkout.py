#!/usr/bin/env python3
"""
Smoke script for a running AI Market server.

Usage:
    python smoke_checkout.py [base_url] [module_id]

Walks the demo path: catalog, demo activation, brief, metrics.
"""
import requests
import sys
import json


def smoke_checkout(base_url: str, module_id: str):
    """Exercise the demo endpoints and print each response."""

    print(f"🔗 Connecting to: {base_url}")
    print("=" * 70)

    try:
        health = requests.get(f"{base_url}/api/health", timeout=10).json()
        print(f"✅ Health: {health['status']} (PayPal configured: {health['paypalConfigured']})")

        catalog = requests.get(f"{base_url}/api/catalog", timeout=10).json()
        print(f"📦 Catalog: {', '.join(item['id'] for item in catalog['items'])}")

        response = requests.post(
            f"{base_url}/api/demo-activation",
            json={"moduleId": module_id},
            timeout=10
        )
        if response.status_code != 200:
            print(f"❌ Error: HTTP {response.status_code}")
            print(response.text)
            return

        activation = response.json()["activation"]
        print(f"🔑 Activation: {activation['token']} (expires {activation['expiresAt']})")

        response = requests.post(
            f"{base_url}/api/briefs",
            json={
                "module": module_id,
                "context": "Smoke test",
                "goals": "Vérifier le parcours démo",
                "sources": ["smoke_checkout.py"]
            },
            timeout=10
        )
        brief = response.json()["brief"]
        print(f"📝 Brief: {brief['id']} for {brief['moduleName']}")

        metrics = requests.get(f"{base_url}/api/metrics", timeout=10).json()
        print(f"📊 Metrics: {json.dumps(metrics)}")

    except requests.exceptions.ConnectionError:
        print(f"❌ Could not connect to {base_url}. Is the server running?")
    except requests.exceptions.Timeout:
        print("❌ Request timed out")
    except Exception as e:
        print(f"❌ Error: {e}")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
    module_id = sys.argv[2] if len(sys.argv) > 2 else "audit-agent"
    smoke_checkout(base_url, module_id)
