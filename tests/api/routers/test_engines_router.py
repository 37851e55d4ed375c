"""Tests for the storage engine router."""

from fastapi.testclient import TestClient


def test_list_engines(client: TestClient) -> None:
    """Test the engine picker list."""
    response = client.get("/v1/engines")
    assert response.status_code == 200

    data = response.json()
    assert data["count"] == len(data["engines"])
    names = [engine["name"] for engine in data["engines"]]
    assert names == ["InnoDB", "MyISAM", "MEMORY", "ARCHIVE"]
    assert data["engines"][0]["is_default"] is True


def test_engine_details(client: TestClient, api_source) -> None:
    """Test engine details."""
    api_source.global_variables["innodb_buffer_pool_size"] = "134217728"
    response = client.get("/v1/engines/innodb")
    assert response.status_code == 200

    data = response.json()
    assert data["engine_id"] == "innodb"
    assert data["title"] == "InnoDB"
    assert data["support"] == 3
    assert data["help_page"] == "innodb-storage-engine"
    assert data["info_pages"] == {"Bufferpool": "Buffer Pool", "Status": "InnoDB Status"}
    assert data["variables"][0]["formatted"] == "131,072 KiB"


def test_unknown_engine(client: TestClient) -> None:
    """Test unknown engines are reported as not supported."""
    response = client.get("/v1/engines/Aria")
    assert response.status_code == 200

    data = response.json()
    assert data["support"] == 0
    assert data["support_message"] == (
        "This MySQL server does not support the Aria storage engine."
    )


def test_engine_page(client: TestClient, api_source) -> None:
    """Test engine information pages."""
    api_source.values["SHOW ENGINE INNODB STATUS;"] = {"Status": "monitor output"}
    response = client.get("/v1/engines/InnoDB/pages/Status")
    assert response.status_code == 200
    assert response.json()["text"] == "monitor output"


def test_unknown_engine_page(client: TestClient) -> None:
    """Test unknown pages are not found."""
    response = client.get("/v1/engines/MyISAM/pages/Status")
    assert response.status_code == 404
    assert response.json()["detail"] == "MyISAM has no information page 'Status'"
