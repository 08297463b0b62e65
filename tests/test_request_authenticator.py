import pytest
import requests

from session_headers.core.auth import RequestAuthenticator, build_authenticated_session

API = "http://api.test"


def _prepared(method: str, path: str, **kwargs) -> requests.PreparedRequest:
    return requests.Request(method, f"{API}{path}", **kwargs).prepare()


REQUEST_SHAPES = [
    ("GET", "/api/items", {}),
    ("GET", "/api/items", {"params": {"page": "2"}}),
    ("POST", "/api/items", {"json": {"name": "x"}}),
    ("PUT", "/api/items/1", {"data": "raw-body", "headers": {"X-Trace": "abc"}}),
    ("DELETE", "/api/items/1", {"headers": {"Accept": "application/json"}}),
]


@pytest.mark.parametrize("method,path,kwargs", REQUEST_SHAPES)
def test_logged_out_request_passes_through(ctx, method, path, kwargs) -> None:
    ctx.save_token("T")
    ctx.session.set_logged_in(False)
    request = _prepared(method, path, **kwargs)

    result = ctx.authenticator.authenticate(request)

    assert result is request
    assert "Authorization" not in result.headers


@pytest.mark.parametrize("method,path,kwargs", REQUEST_SHAPES)
def test_logged_in_request_gets_bearer_header_on_copy(ctx, method, path, kwargs) -> None:
    ctx.save_token("T")
    ctx.session.set_logged_in(True)
    request = _prepared(method, path, **kwargs)
    original_headers = dict(request.headers)

    result = ctx.authenticator.authenticate(request)

    assert result is not request
    assert result.headers["Authorization"] == "Bearer T"
    assert result.method == request.method
    assert result.url == request.url
    assert result.body == request.body
    other = {k: v for k, v in result.headers.items() if k != "Authorization"}
    assert other == original_headers
    # исходный запрос не изменен
    assert dict(request.headers) == original_headers


def test_logged_in_without_stored_token_passes_through(ctx) -> None:
    ctx.session.set_logged_in(True)
    request = _prepared("GET", "/api/items")

    assert ctx.authenticator.authenticate(request) is request


def test_empty_stored_token_is_treated_as_absent(ctx) -> None:
    ctx.save_token("")
    ctx.session.set_logged_in(True)
    request = _prepared("GET", "/api/items")

    assert ctx.authenticator.authenticate(request) is request


def test_existing_authorization_header_is_overwritten(ctx) -> None:
    ctx.save_token("fresh")
    ctx.session.set_logged_in(True)
    request = _prepared("GET", "/api/items", headers={"Authorization": "Basic Zm9vOmJhcg=="})

    result = ctx.authenticator.authenticate(request)

    assert result.headers["Authorization"] == "Bearer fresh"
    assert request.headers["Authorization"] == "Basic Zm9vOmJhcg=="


def test_token_is_read_from_store_not_from_cached_headers(ctx) -> None:
    ctx.session.load_headers_from_token("cached")
    ctx.save_token("fresh")
    ctx.session.set_logged_in(True)

    result = ctx.authenticator(_prepared("GET", "/api/items"))

    assert result.headers["Authorization"] == "Bearer fresh"
    assert ctx.session.get_auth_options().authorization == "Bearer cached"


def test_token_is_inserted_verbatim(ctx) -> None:
    token = "eyJhbGciOiJIUzI1NiJ9.e30.sig+/="
    ctx.save_token(token)
    ctx.session.set_logged_in(True)

    result = ctx.authenticator(_prepared("GET", "/api/items"))

    assert result.headers["Authorization"] == f"Bearer {token}"


def test_authenticator_runs_in_http_pipeline(ctx, adapter) -> None:
    adapter.add("GET", "/api/items", body=[])
    ctx.save_token("T")
    ctx.session.set_logged_in(True)

    response = ctx.http.get(f"{API}/api/items")

    assert response.status_code == 200
    assert adapter.sent[-1].headers["Authorization"] == "Bearer T"


def test_pipeline_sends_unauthenticated_request_after_logout(ctx, adapter) -> None:
    adapter.add("GET", "/api/items", body=[])
    ctx.save_token("T")
    ctx.session.set_logged_in(True)
    ctx.session.logout()

    ctx.http.get(f"{API}/api/items")

    assert "Authorization" not in adapter.sent[-1].headers


def test_build_authenticated_session_uses_injected_token_source(ctx, adapter) -> None:
    class StaticTokenSource:
        def get(self):
            return "from-source"

    http = requests.Session()
    http.trust_env = False
    http.mount("http://", adapter)
    adapter.add("GET", "/api/items", body=[])
    ctx.session.set_logged_in(True)

    http = build_authenticated_session(ctx.session, StaticTokenSource(), http=http)
    http.get(f"{API}/api/items")

    assert isinstance(http.auth, RequestAuthenticator)
    assert adapter.sent[-1].headers["Authorization"] == "Bearer from-source"
