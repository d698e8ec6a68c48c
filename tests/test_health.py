def test_health_endpoint_reports_service_metadata(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "service": "Personal Data Hook",
        "version": "0.1.0",
        "environment": "local",
        "record_type": "personal_data",
    }
