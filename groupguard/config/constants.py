"""
Constants and user-facing texts
"""
from telegram.constants import ChatMemberStatus, ChatType

VERIFY_CALLBACK_PREFIX = "verify"

# Statuses in the required channel that count as "following"
MEMBER_OK_STATUSES = (
    ChatMemberStatus.MEMBER,
    ChatMemberStatus.ADMINISTRATOR,
    ChatMemberStatus.OWNER,
)

GROUP_CHAT_TYPES = (ChatType.GROUP, ChatType.SUPERGROUP)

DEFAULT_VERIFY_TIMEOUT_SECONDS = 300
DEFAULT_BAN_DURATION_SECONDS = 86400
DEFAULT_KEYWORDS_TTL_SECONDS = 300
DEFAULT_WEBHOOK_PORT = 8443
DEFAULT_WEBHOOK_PATH = "webhook"

TEXTS = {
    # Membership gate
    "default_member_name": "新成员",
    "welcome": "欢迎 {name} 加入本群！\n\n为了防止机器人和广告号，请点击下方按钮完成「真人验证」。\n",
    "welcome_channel": "另外，需要先关注指定频道 {channel} 才能通过验证。\n",
    "welcome_timeout": "（建议在 {seconds} 秒内完成）",
    "verify_button": "✅ 我是真人，点击验证",
    "verify_wrong_user": "只能本人点击该验证按钮。",
    "verify_follow_channel": "请先关注频道 {channel} 再点击验证。",
    "verify_success": "验证成功，欢迎加入聊天！",
    "verify_announcement": "✅ 用户已通过验证，欢迎~",
    "unknown_action": "未知操作。",

    # Admin commands
    "no_permission": "你没有权限使用 /{command} 命令。",
    "ban_usage": "请通过「回复目标用户的消息」的方式使用 /ban，例如：\n回复某条消息后发送 /ban 60 表示禁言 60 分钟。",
    "banl_usage": "请通过「回复目标用户的消息」的方式使用 /banl。",
    "unban_usage": "请通过「回复目标用户的消息」的方式使用 /unban。",
    "ban_done_minutes": "已禁言该用户 {minutes} 分钟。",
    "ban_done_forever": "已永久禁言该用户。",
    "banl_done": "已将该用户移出本群。",
    "unban_done": "已解除该用户的禁言和封禁。",

    # Keyword enforcement
    "keyword_ban": "因发送包含敏感关键词「{keyword}」的消息，用户 {name} 已被封禁。",
}
