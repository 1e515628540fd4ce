from enum import Enum


class NotificationType(str, Enum):
    GROUP_CREATED = "group_created"
    MEMBER_ADDED = "member_added"
    PAYMENT_ADDED = "payment_added"
    PAYMENT_SETTLED = "payment_settled"
