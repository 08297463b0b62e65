from requests.cookies import RequestsCookieJar, create_cookie

from session_headers.core.storage import CookieTokenStore


def test_missing_cookie_reads_as_empty_string() -> None:
    store = CookieTokenStore(domain="api.test")

    assert store.get() == ""
    assert store.get("token") == ""
    assert store.exists() is False


def test_set_get_delete() -> None:
    store = CookieTokenStore(domain="api.test")

    store.set("token", "T", "/")
    assert store.get("token") == "T"
    assert store.exists("token") is True

    store.delete("token", "/")
    assert store.get("token") == ""
    assert store.exists("token") is False


def test_delete_missing_cookie_is_a_noop() -> None:
    store = CookieTokenStore(domain="api.test")

    store.delete("token", "/")
    store.delete()

    assert store.exists() is False


def test_empty_value_exists_but_reads_empty() -> None:
    store = CookieTokenStore(domain="api.test")

    store.set("token", "")

    assert store.exists("token") is True
    assert store.get("token") == ""


def test_cookies_of_other_domains_are_ignored() -> None:
    jar = RequestsCookieJar()
    jar.set_cookie(create_cookie("token", "foreign", domain="other.test", path="/"))
    store = CookieTokenStore(jar=jar, domain="api.test")

    assert store.get("token") == ""
    assert store.exists("token") is False

    store.set("token", "mine")
    assert store.get("token") == "mine"
    assert len(jar) == 2


def test_token_survives_restart_with_cookie_file(tmp_path) -> None:
    cookie_file = str(tmp_path / "cookies.lwp")

    first = CookieTokenStore(filename=cookie_file, domain="api.test")
    first.set("token", "persisted", "/")

    second = CookieTokenStore(filename=cookie_file, domain="api.test")
    assert second.get("token") == "persisted"

    second.delete("token", "/")
    third = CookieTokenStore(filename=cookie_file, domain="api.test")
    assert third.exists("token") is False


def test_store_is_a_token_source() -> None:
    store = CookieTokenStore(domain="api.test", default_key="jwt")
    store.set("jwt", "T")

    assert store.get() == "T"
