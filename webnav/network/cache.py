import time

# cache key -> {"expires": timestamp, "body": str}
CACHE = {}


def lookup(key):
    entry = CACHE.get(key)
    if entry is None:
        return None
    if time.time() < entry["expires"]:
        return entry["body"]
    del CACHE[key]
    return None


def store(key, body, max_age):
    CACHE[key] = {"expires": time.time() + max_age, "body": body}


def clear():
    CACHE.clear()
