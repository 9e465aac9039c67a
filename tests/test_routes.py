"""Integration tests for routes."""


def test_home_page(client):
    """Home page is accessible without certificate."""
    response = client.get("/")
    assert response.is_success
    assert "Grue" in response.body


def test_play_requires_cert(client):
    """Play page requires a client certificate."""
    response = client.get("/play")
    assert response.is_certificate_required


def test_play_with_cert(auth_client):
    """Play page starts at the west of the house."""
    response = auth_client.get("/play")
    assert response.is_success
    assert "West of House" in response.body
    assert "=> /go/north" in response.body


def test_go_direction(auth_client):
    """Going a direction via /go/ route works."""
    response = auth_client.get("/go/west")
    assert response.is_success
    assert "Forest" in response.body
    assert "Moves: 1" in response.body


def test_cmd_input_prompt(auth_client):
    """The /cmd route prompts for input when no query."""
    response = auth_client.get("/cmd")
    assert response.is_input_required


def test_cmd_with_input(auth_client):
    """The /cmd route processes commands."""
    response = auth_client.get_input("/cmd", "open mailbox")
    assert response.is_success
    assert "leaflet" in response.body


def test_game_persists_between_requests(auth_client):
    """Each request picks up where the last one left off."""
    auth_client.get_input("/cmd", "open mailbox")
    auth_client.get_input("/cmd", "take leaflet")
    response = auth_client.get("/inventory")
    assert response.is_success
    assert "You are carrying:" in response.body
    assert "leaflet" in response.body


def test_inventory_route(auth_client):
    """The /inventory route shows inventory."""
    response = auth_client.get("/inventory")
    assert response.is_success
    assert "empty-handed" in response.body


def test_score_route(auth_client):
    """The /score route shows score and rank."""
    response = auth_client.get("/score")
    assert response.is_success
    assert "Your score is 0" in response.body
    assert "Beginner" in response.body


def test_help_page(client):
    """Help page is accessible."""
    response = client.get("/help")
    assert response.is_success
    assert "command" in response.body.lower()


def test_about_page(client):
    """About page is accessible."""
    response = client.get("/about")
    assert response.is_success
    assert "Zork" in response.body
    assert "rooms" in response.body
    assert "350 points" in response.body


def test_new_game_prompt(auth_client):
    """The /new route prompts for confirmation."""
    response = auth_client.get("/new")
    assert response.is_input_required


def test_new_game_confirmed(auth_client):
    """Confirming /new puts the player back at the start."""
    auth_client.get("/go/west")
    response = auth_client.get_input("/new", "YES")
    assert response.is_success
    assert "A new game begins." in response.body
    assert "West of House" in response.body
    assert "Moves: 0" in response.body


def test_look_route(auth_client):
    """The /look route works."""
    response = auth_client.get("/look")
    assert response.is_success
    assert "small mailbox" in response.body


def test_home_page_for_new_certificate(auth_client):
    """A certificate with no game yet is invited to start one."""
    response = auth_client.get("/")
    assert response.is_success
    assert "Start a game" in response.body
    assert "Your game" not in response.body


def test_home_page_shows_progress(auth_client):
    """A returning player sees their score, moves and rank."""
    auth_client.get("/go/west")
    response = auth_client.get("/")
    assert response.is_success
    assert "## Your game" in response.body
    assert "1 moves" in response.body
    assert "Beginner" in response.body
    assert "Resume your game" in response.body


def test_help_lists_verbs(client):
    """The help page lists the verbs the parser knows."""
    response = client.get("/help")
    assert "ATTACK" in response.body
    assert "NORTHEAST" in response.body
