"""
Upload a video with the resumable upload protocol
"""
import logging

from fbgraph import GraphAPI, GraphConfig, RetryConfig, setup_logging


def main():
    logging.basicConfig(format="%(asctime)s %(name)s %(message)s")
    setup_logging(logging.INFO)

    # Wait 1s, 2s, 4s... between retries of a failed chunk
    config = GraphConfig(retry=RetryConfig(max_transfer_tries=5, base_delay=1.0))
    fb = GraphAPI(config)

    result = fb.upload_video(
        "me",
        "holiday.mp4",
        {"title": "Holiday", "description": "Two weeks at the beach"},
        access_token="user-access-token",
    )
    print(f"Video ID: {result['video_id']} (success={result['success']})")


if __name__ == "__main__":
    main()
