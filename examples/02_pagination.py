"""
Walk an edge page by page
"""
from fbgraph import GraphAPI


def main():
    fb = GraphAPI(default_access_token="user-access-token")

    friends = fb.get("/me/friends?limit=25").get_graph_edge("GraphUser")
    print(f"Total friends: {friends.get_total_count()}")

    page = friends
    while page is not None:
        for friend in page:
            print(f"  {friend.name}")
        page = fb.next(page)


if __name__ == "__main__":
    main()
