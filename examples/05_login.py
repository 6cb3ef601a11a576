"""
Server-side login through the OAuth redirect flow
"""
from fbgraph import GraphAPI

CALLBACK_URL = "https://example.com/fb-callback"


def main():
    fb = GraphAPI()
    helper = fb.get_redirect_login_helper()

    # 1. Send the user to the login dialog
    print("Log in here:", helper.get_login_url(CALLBACK_URL, ["email", "user_posts"]))

    # 2. Facebook redirects back with ?code=...&state=...
    callback = input("Paste the URL you were redirected to: ")
    if helper.get_error(callback):
        print("Login failed:", helper.get_error_description(callback))
        return

    token = helper.get_access_token(callback)
    metadata = fb.get_oauth2_client().debug_token(token)
    metadata.validate_app_id(fb.get_app().get_id())
    metadata.validate_expiration()

    if not token.is_long_lived():
        token = fb.get_oauth2_client().get_long_lived_access_token(token)
    print(f"Logged in as user {metadata.get_user_id()}, token expires {token.get_expires_at()}")


if __name__ == "__main__":
    main()
