import pytest


class FakeClient:
    """Records outbound calls in order instead of talking to Telegram"""

    def __init__(self, member_status=None, admin_ids=None):
        self.calls = []
        self.member_status = member_status
        self.admin_ids = admin_ids

    def names(self):
        return [call[0] for call in self.calls]

    def find(self, name):
        return [call for call in self.calls if call[0] == name]

    async def send_message(self, chat_id, text, reply_to=None, button=None):
        self.calls.append(("send_message", chat_id, text, reply_to, button))
        return True

    async def delete_message(self, chat_id, message_id):
        self.calls.append(("delete_message", chat_id, message_id))
        return True

    async def restrict(self, chat_id, user_id, permissions, until=None):
        self.calls.append(("restrict", chat_id, user_id, permissions, until))
        return True

    async def ban(self, chat_id, user_id, until=None):
        self.calls.append(("ban", chat_id, user_id, until))
        return True

    async def unban(self, chat_id, user_id, only_if_banned=True):
        self.calls.append(("unban", chat_id, user_id, only_if_banned))
        return True

    async def get_member_status(self, chat_id, user_id):
        self.calls.append(("get_member_status", chat_id, user_id))
        return self.member_status

    async def get_admin_ids(self, chat_id):
        self.calls.append(("get_admin_ids", chat_id))
        return self.admin_ids

    async def answer_callback(self, callback_query_id, text=None, alert=False):
        self.calls.append(("answer_callback", callback_query_id, text, alert))
        return True


class FakeClock:
    def __init__(self, now=1_700_000_000):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_client():
    return FakeClient
