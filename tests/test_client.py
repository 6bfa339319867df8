import asyncio

from telegram.error import BadRequest

from groupguard.services.client import ChatClient, RESTRICT_ALL


class DummyAdmin:
    def __init__(self, user_id):
        self.user = type("U", (), {"id": user_id})()


class DummyBot:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def _record(self, name, kwargs):
        self.calls.append((name, kwargs))
        if self.fail:
            raise BadRequest("not enough rights")

    async def restrict_chat_member(self, **kwargs):
        self._record("restrict_chat_member", kwargs)
        return True

    async def send_message(self, **kwargs):
        self._record("send_message", kwargs)

    async def get_chat_administrators(self, **kwargs):
        self._record("get_chat_administrators", kwargs)
        return [DummyAdmin(1), DummyAdmin(2)]

    async def get_chat_member(self, **kwargs):
        self._record("get_chat_member", kwargs)
        return type("M", (), {"status": "left"})()


def test_restrict_passes_until():
    bot = DummyBot()
    ok = asyncio.run(ChatClient(bot).restrict(-100, 5, RESTRICT_ALL, until=123))
    assert ok
    assert bot.calls[0][1] == {
        "chat_id": -100, "user_id": 5, "permissions": RESTRICT_ALL, "until_date": 123,
    }


def test_errors_are_reported_not_raised():
    client = ChatClient(DummyBot(fail=True))
    assert asyncio.run(client.restrict(-100, 5, RESTRICT_ALL)) is False
    assert asyncio.run(client.send_message(-100, "hi")) is False
    assert asyncio.run(client.get_admin_ids(-100)) is None
    assert asyncio.run(client.get_member_status("@news", 5)) is None


def test_admin_ids_and_status():
    client = ChatClient(DummyBot())
    assert asyncio.run(client.get_admin_ids(-100)) == {1, 2}
    assert asyncio.run(client.get_member_status("@news", 5)) == "left"


def test_send_message_reply_and_button():
    bot = DummyBot()
    asyncio.run(ChatClient(bot).send_message(-100, "hi", reply_to=7))
    kwargs = bot.calls[0][1]
    assert kwargs["reply_parameters"].message_id == 7
    assert kwargs["reply_markup"] is None
