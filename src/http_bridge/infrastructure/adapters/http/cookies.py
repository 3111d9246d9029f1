from __future__ import annotations

from http.cookiejar import Cookie, CookieJar, DefaultCookiePolicy


class RejectAllCookiePolicy(DefaultCookiePolicy):
    """Cookie policy that neither stores nor returns cookies.

    Each call is independent: a Set-Cookie from one response must never come
    back as a Cookie header on a later request sharing the same client.
    """

    def set_ok(self, cookie: Cookie, request: object) -> bool:
        return False

    def return_ok(self, cookie: Cookie, request: object) -> bool:
        return False


def disable_cookie_persistence(jar: CookieJar) -> None:
    jar.set_policy(RejectAllCookiePolicy())
    jar.clear()
