def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_config_reports_hole_count(client):
    body = client.get("/config").json()
    assert body["hole_count"] == 9
    assert body["app_name"]


def test_list_teams(client):
    response = client.get("/teams")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "Blue"},
        {"id": 2, "name": "Purple"},
        {"id": 3, "name": "Red"},
        {"id": 4, "name": "Green"},
    ]


def test_team_players(client):
    response = client.get("/teams/2/users")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Hamish", "Clair", "Riley"]
    assert all(p["team_id"] == 2 for p in response.json())


def test_team_players_unknown_team(client):
    response = client.get("/teams/42/users")
    assert response.status_code == 404
    assert response.json() == {"detail": "Team not found"}


def test_team_players_rejects_non_numeric_id(client):
    assert client.get("/teams/abc/users").status_code == 422


def test_list_players_with_filter(client):
    assert len(client.get("/users").json()) == 13
    assert len(client.get("/users", params={"team_id": 1}).json()) == 4


def test_get_hole(client):
    response = client.get("/holes/1")
    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "name": "Red Brick Hotel",
        "par": 0,
        "location": "83 Annerley Road Woolloongabba",
        "time": "2024-10-19T14:00:00",
    }
    assert client.get("/holes/10").status_code == 404


def test_list_holes(client):
    holes = client.get("/holes").json()
    assert [h["id"] for h in holes] == list(range(1, 10))


def test_update_par(client):
    response = client.put("/holes/3", json={"par": 4})
    assert response.status_code == 200
    assert response.json() == {"message": "Hole par updated successfully"}
    assert client.get("/holes/3").json()["par"] == 4


def test_update_par_rejects_bad_input(client):
    for body in ({"par": "3"}, {}, {"par": None}, {"par": True}, {"par": 2.5}):
        response = client.put("/holes/1", json=body)
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid input data"}


def test_update_par_unknown_hole(client):
    response = client.put("/holes/99", json={"par": 3})
    assert response.status_code == 404


def test_score_upsert_roundtrip(client):
    assert client.get("/users/1/holes/1/score").status_code == 404

    assert client.put("/users/1/holes/1/score", json={"sips": 3}).status_code == 200
    response = client.put("/users/1/holes/1/score", json={"sips": 5})
    assert response.json() == {"message": "Score updated successfully"}

    assert client.get("/users/1/holes/1/score").json() == {
        "user_id": 1,
        "hole_id": 1,
        "sips": 5,
    }
    assert client.get("/holes/1/scores").json() == [
        {"user_id": 1, "hole_id": 1, "sips": 5}
    ]
    assert len(client.get("/scores").json()) == 1


def test_score_rejects_bad_input(client):
    for body in ({"sips": -1}, {"sips": "2"}, {"sips": 1.5}, {}):
        response = client.put("/users/1/holes/1/score", json=body)
        assert response.status_code == 400
    assert client.get("/scores").json() == []


def test_score_unknown_player_or_hole(client):
    assert client.put("/users/99/holes/1/score", json={"sips": 1}).status_code == 404
    assert client.put("/users/1/holes/99/score", json={"sips": 1}).status_code == 404
    assert client.get("/holes/99/scores").status_code == 404


def test_hole_standings(client):
    client.put("/holes/1", json={"par": 2})
    # Blue: Logan, Rod. Purple: Hamish, Clair.
    client.put("/users/1/holes/1/score", json={"sips": 1})
    client.put("/users/2/holes/1/score", json={"sips": 3})
    client.put("/users/5/holes/1/score", json={"sips": 3})
    client.put("/users/6/holes/1/score", json={"sips": 4})

    body = client.get("/holes/1/standings").json()

    assert body["hole"]["id"] == 1
    assert body["winningTeam"] == {"id": 1, "name": "Blue"}
    assert body["teamResults"][0] == {
        "team": {"id": 1, "name": "Blue"},
        "averageSips": 2.0,
        "differenceFromPar": 0.0,
    }
    assert body["teamResults"][1]["averageSips"] == 3.5
    assert body["teamResults"][1]["differenceFromPar"] == 1.5
    assert body["teamResults"][2]["averageSips"] is None
    assert body["teamResults"][2]["differenceFromPar"] is None
    assert client.get("/holes/42/standings").status_code == 404


def test_overall_standings(client):
    # Red (Shak=8) beats Green (Sam=11) on holes 1 and 3, Green wins hole 2.
    for hole_id, red, green in ((1, 1, 2), (2, 3, 0), (3, 0, 4)):
        client.put(f"/users/8/holes/{hole_id}/score", json={"sips": red})
        client.put(f"/users/11/holes/{hole_id}/score", json={"sips": green})

    body = client.get("/standings").json()

    assert len(body["holes"]) == 9
    assert [h["winningTeam"]["name"] for h in body["holes"][:3]] == ["Red", "Green", "Red"]
    assert all(h["winningTeam"] is None for h in body["holes"][3:])
    assert body["overallWinner"] == {"id": 3, "name": "Red"}
    assert body["holeWins"] == {"1": 0, "2": 0, "3": 2, "4": 1}


def test_empty_standings(client):
    body = client.get("/standings").json()
    assert body["overallWinner"] is None
    assert all(h["winningTeam"] is None for h in body["holes"])


def test_reset(client):
    client.put("/holes/1", json={"par": 3})
    client.put("/users/1/holes/1/score", json={"sips": 2})

    response = client.post("/reset")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert client.get("/scores").json() == []
    assert all(h["par"] == 0 for h in client.get("/holes").json())


def test_out_of_range_numbers_are_rejected(client):
    response = client.put("/users/1/holes/1/score", json={"sips": 1e20})
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid input data"}
    assert client.put("/holes/1", json={"par": 1e300}).status_code == 400
    assert client.get("/scores").json() == []
    assert client.get("/holes/1").json()["par"] == 0


def test_all_scoring_routes_are_registered(client):
    paths = {route.path for route in client.app.routes}
    assert {
        "/health",
        "/teams",
        "/teams/{team_id}/users",
        "/users",
        "/holes/{hole_id}",
        "/holes/{hole_id}/scores",
        "/users/{user_id}/holes/{hole_id}/score",
        "/holes/{hole_id}/standings",
        "/standings",
        "/reset",
    } <= paths
