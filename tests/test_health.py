def test_health_live(client, recording_sender):
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}
    assert recording_sender.sent == []
