import random
from threading import Lock
from locust import HttpUser, task, between


_ids_lock = Lock()
_ids = []


class PriceUser(HttpUser):
    wait_time = between(0.05, 0.15)

    @task(5)
    def list_prices(self):
        self.client.get("/prices", name="GET /prices")

    @task(3)
    def create_and_get(self):
        price = random.randint(1, 10_000)
        r = self.client.post("/prices", json={"price": price}, name="POST /prices")
        if r.status_code == 201:
            pid = r.json().get("id")
            if isinstance(pid, str):
                with _ids_lock:
                    _ids.append(pid)
                self.client.get(f"/prices/{pid}", name="GET /prices/:id")

    @task(1)
    def delete(self):
        with _ids_lock:
            pid = _ids.pop(random.randrange(len(_ids))) if _ids else None
        if pid is None:
            return
        # another user may have raced us to it; 404 is expected then
        with self.client.delete(f"/prices/{pid}", name="DELETE /prices/:id", catch_response=True) as r:
            if r.status_code in (200, 404):
                r.success()

    @task(1)
    def bad_create(self):
        with self.client.post("/prices", json={"price": "cheap"}, name="POST /prices (invalid)", catch_response=True) as r:
            if r.status_code == 400:
                r.success()
            else:
                r.failure(f"expected 400, got {r.status_code}")
