"""
Basic usage - Read your profile
"""
from fbgraph import GraphAPI


def main():
    # App credentials come from FACEBOOK_APP_ID / FACEBOOK_APP_SECRET
    fb = GraphAPI(default_access_token="user-access-token")

    response = fb.get("/me?fields=id,name,birthday,hometown")
    user = response.get_graph_user()

    print(f"Connected as {user.name} ({user.id})")
    if user.birthday is not None and user.birthday.has_date():
        print(f"Birthday: {user.birthday:%B %d}")
    if user.hometown is not None:
        print(f"Hometown: {user.hometown.name}")


if __name__ == "__main__":
    main()
