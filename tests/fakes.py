from botocore.exceptions import ClientError


def client_error(code: str, op: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, op)


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table keyed by `post_uuid`."""

    def __init__(self, items=None, page_size=None, fail_on_delete=None):
        self.rows = {}
        self.order = []
        self.page_size = page_size
        self.fail_on_delete = fail_on_delete
        self.scan_calls = []
        self.deleted = []
        self.delete_calls = 0
        for it in items or []:
            self._put(dict(it))

    def _put(self, item):
        key = item["post_uuid"]
        if key not in self.rows:
            self.order.append(key)
        self.rows[key] = item

    def scan(self, **kw):
        self.scan_calls.append(kw)
        start = 0
        esk = kw.get("ExclusiveStartKey")
        if esk:
            start = self.order.index(esk["post_uuid"]) + 1
        limit = kw.get("Limit") or self.page_size or len(self.order) or 1
        live = [k for k in self.order[start:] if k in self.rows]
        chunk = live[:limit]
        resp = {"Items": [dict(self.rows[k]) for k in chunk]}
        if len(live) > limit:
            resp["LastEvaluatedKey"] = {"post_uuid": chunk[-1]}
        return resp

    def get_item(self, Key):
        item = self.rows.get(Key["post_uuid"])
        return {"Item": dict(item)} if item else {}

    def put_item(self, Item, ConditionExpression=None):
        if ConditionExpression and Item["post_uuid"] in self.rows:
            raise client_error("ConditionalCheckFailedException", "PutItem")
        self._put(dict(Item))
        return {}

    def delete_item(self, Key):
        self.delete_calls += 1
        if self.fail_on_delete and self.delete_calls == self.fail_on_delete:
            raise client_error("ProvisionedThroughputExceededException", "DeleteItem")
        self.rows.pop(Key["post_uuid"], None)
        self.deleted.append(Key["post_uuid"])
        return {}
