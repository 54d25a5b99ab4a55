from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from famfin.constants.limits import LEADERBOARD_TOP_LIMIT
from famfin.services.records import ZERO, field_of, to_amount


@dataclass(frozen=True)
class Participant:
    id: str
    name: str
    member_id: Optional[int] = None


@dataclass(frozen=True)
class MemberStat:
    id: str
    name: str
    member_id: Optional[int]
    net_savings: Decimal
    expense_count: int
    income_count: int


@dataclass(frozen=True)
class Leaderboard:
    stats: List[MemberStat] = field(default_factory=list)
    top_savers: List[MemberStat] = field(default_factory=list)
    top_trackers: List[MemberStat] = field(default_factory=list)


@dataclass
class _Bucket:
    income: Decimal = ZERO
    expenses: Decimal = ZERO
    income_count: int = 0
    expense_count: int = 0


def build_roster(owner_id: Any, owner_name: str, members: Iterable[Any]) -> List[Participant]:
    """Owner first (no member reference), then members in the order given."""
    roster = [Participant(id=str(owner_id), name=owner_name, member_id=None)]
    for member in members:
        member_id = field_of(member, "id")
        roster.append(Participant(id=str(member_id), name=field_of(member, "name"), member_id=member_id))
    return roster


def member_stats(
    participants: List[Participant],
    expenses: Iterable[Any],
    income: Iterable[Any],
) -> List[MemberStat]:
    buckets: Dict[Optional[int], _Bucket] = {}

    for record in income:
        bucket = buckets.setdefault(field_of(record, "member_id"), _Bucket())
        bucket.income += to_amount(field_of(record, "amount"))
        bucket.income_count += 1

    for record in expenses:
        bucket = buckets.setdefault(field_of(record, "member_id"), _Bucket())
        bucket.expenses += to_amount(field_of(record, "amount"))
        bucket.expense_count += 1

    stats = []
    for p in participants:
        bucket = buckets.get(p.member_id, _Bucket())
        stats.append(MemberStat(
            id=p.id,
            name=p.name,
            member_id=p.member_id,
            net_savings=bucket.income - bucket.expenses,
            expense_count=bucket.expense_count,
            income_count=bucket.income_count,
        ))
    return stats


def rank(stats: List[MemberStat], limit: int = LEADERBOARD_TOP_LIMIT) -> Leaderboard:
    # both rankings are stable: ties keep roster order
    return Leaderboard(
        stats=stats,
        top_savers=sorted(stats, key=lambda s: s.net_savings, reverse=True)[:limit],
        top_trackers=sorted(stats, key=lambda s: s.expense_count, reverse=True)[:limit],
    )


def monthly_leaderboard(
    participants: List[Participant],
    expenses: Iterable[Any],
    income: Iterable[Any],
) -> Leaderboard:
    """Expects records already restricted to the current month."""
    return rank(member_stats(participants, expenses, income))
