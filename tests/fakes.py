"""Fake pymongo collection covering the calls MongoStorage makes."""


class FakeCollection:
    def __init__(self):
        self.docs: dict[str, dict] = {}

    def find_one(self, query: dict):
        return self.docs.get(query["_id"])

    def replace_one(self, query: dict, doc: dict, upsert: bool = False):
        assert upsert is True
        self.docs[query["_id"]] = dict(doc)

    def delete_one(self, query: dict):
        self.docs.pop(query["_id"], None)
