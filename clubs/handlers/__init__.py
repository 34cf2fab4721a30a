from clubs.handlers.screens import (
    AdminOverview,
    AdminScreen,
    ClubSummary,
    GuestOverview,
    GuestScreen,
    LoginScreen,
    MemberOverview,
    MemberScreen,
)

__all__ = [
    "AdminOverview",
    "AdminScreen",
    "ClubSummary",
    "GuestOverview",
    "GuestScreen",
    "LoginScreen",
    "MemberOverview",
    "MemberScreen",
]
