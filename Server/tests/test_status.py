"""
Tests for the status endpoints
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def test_health_check(client):
    """Test health check needs no session"""
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "Dialog Admin Server"
    assert body["version"] == "1.0.0"
