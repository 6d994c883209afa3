import os
import random

from locust import HttpUser, between, task

from hnapi import HackerNewsClient, HackerNewsError, TypeMismatch


class HNUser(HttpUser):
    host = os.getenv("HACKERNEWS_BASE_URL", "https://hacker-news.firebaseio.com/")
    wait_time = between(0.2, 0.8)

    def on_start(self):
        # Locust's HttpSession is a requests.Session, so requests land in its stats.
        self.hn = HackerNewsClient(session=self.client, base_uri=self.host)

    @task(3)
    def top_stories(self):
        with self.client.rename_request("/topstories"):
            self.hn.get_top_stories()

    @task(1)
    def story(self):
        try:
            with self.client.rename_request("/topstories (seed)"):
                ids = self.hn.get_top_stories()
        except HackerNewsError:
            return
        if ids:
            with self.client.rename_request("/item/{id}"):
                try:
                    self.hn.get_story(random.choice(ids[:100]))
                except TypeMismatch:
                    # jobs and polls also appear on the front page
                    pass
