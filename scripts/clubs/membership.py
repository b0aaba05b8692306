from __future__ import annotations

from typing import List, Optional

from .models import Club, Member


def submit(club: Club, name: str, text: str) -> Member:
    member = Member(name=name, application_text=text)
    club.pending_applications.append(member)
    return member


def approve(club: Club, name: str) -> Optional[Member]:
    """
    Remove and return the first pending application whose applicant name matches.
    Approved members are not tracked anywhere; the caller decides what to do with the result.
    """
    for index, member in enumerate(club.pending_applications):
        if member.name == name:
            return club.pending_applications.pop(index)
    return None


def pending(club: Club) -> List[Member]:
    return list(club.pending_applications)
