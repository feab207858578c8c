"""Test doubles for the search flow collaborators"""

PASSWORD = "correct-horse"


class FakeCache:
    def __init__(self, initial=None):
        self.store = dict(initial or {})
        self.ttls = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ttl):
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def values(self):
        return list(self.store.values())


class ForgetfulCache(FakeCache):
    """Never keeps anything, so every search is a miss"""

    async def set(self, key, value, ttl):
        return True


class FakeDetector:
    def __init__(self, language="en"):
        self.language = language
        self.calls = []

    async def detect(self, text):
        self.calls.append(text)
        return self.language


class FakeWikipedia:
    def __init__(self, extract=None, image=None):
        self.extract = extract
        self.image = image
        self.calls = []

    async def get_extract(self, language, title):
        self.calls.append(("extract", language, title))
        return self.extract

    async def get_lead_image(self, language, title):
        self.calls.append(("image", language, title))
        return self.image


class FakeChat:
    def __init__(self, replies=None, error=None):
        self.replies = list(replies or ["generated summary", "generated article"])
        self.error = error
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.replies[len(self.prompts) - 1]


class FakePopularity:
    def __init__(self):
        self.upserts = []

    async def upsert(self, keyword, text, img_src):
        self.upserts.append((keyword, text, img_src))


class Untouchable:
    """Adapter double that fails the test if any method is used"""

    def __getattr__(self, name):
        raise AssertionError(f"unexpected call to {name}")
