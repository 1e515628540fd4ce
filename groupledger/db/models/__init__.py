from groupledger.db.models.group import Group
from groupledger.db.models.group_member import GroupMember
from groupledger.db.models.payment import Payment
from groupledger.db.models.settlement import Settlement

__all__ = ["Group", "GroupMember", "Payment", "Settlement"]
