"""
Send several requests in one round trip
"""
from fbgraph import GraphAPI


def main():
    fb = GraphAPI(default_access_token="user-access-token")

    responses = fb.send_batch_request({
        "user": fb.request("GET", "/me?fields=id,name"),
        "likes": fb.request("GET", "/me/likes?limit=5"),
        "post": fb.request("POST", "/me/feed", {"message": "Hello from a batch"}),
    })

    for name, response in responses:
        if response.is_error():
            print(f"{name}: failed ({response.thrown_exception})")
        else:
            print(f"{name}: {response.get_decoded_body()}")


if __name__ == "__main__":
    main()
