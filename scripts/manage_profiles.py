# scripts/manage_profiles.py

import argparse
import asyncio
import sys

from vendorhub.core.errors import AppError
from vendorhub.crud import profile as profile_crud
from vendorhub.db import async_session
from vendorhub.models.profile import OnboardingStatus
from vendorhub.services import onboarding


async def list_profiles(status=None):
    async with async_session() as session:
        profiles = await profile_crud.list_profiles(session, OnboardingStatus(status) if status else None)
        if not profiles:
            print("⚠️  No profiles found.")
            return
        for p in profiles:
            admin = " [admin]" if p.is_admin else ""
            print(f"{p.id:>5}  {p.onboarding_status.value:<9} {p.business_name} <{p.email}>{admin}")


async def promote(email):
    async with async_session() as session:
        profile = await profile_crud.get_by_email(session, email)
        if not profile:
            print(f"⚠️  No profile found for: {email}")
            return 1
        profile.is_admin = True
        if profile.onboarding_status != OnboardingStatus.ACTIVE:
            onboarding.transition(profile, OnboardingStatus.ACTIVE, actor_is_admin=True, actor_id="cli")
        await session.commit()
        print(f"✅ {email} is now an active admin.")
        return 0


async def set_status(email, target):
    async with async_session() as session:
        profile = await profile_crud.get_by_email(session, email)
        if not profile:
            print(f"⚠️  No profile found for: {email}")
            return 1
        try:
            onboarding.transition(profile, OnboardingStatus(target), actor_is_admin=True, actor_id="cli")
        except AppError as exc:
            print(f"❌ {exc.message}")
            return 1
        await session.commit()
        print(f"✅ {email}: {target}")
        return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Manage VendorHub profiles")
    sub = parser.add_subparsers(dest="command")

    list_cmd = sub.add_parser("list", help="List profiles")
    list_cmd.add_argument("--status", choices=[s.value for s in OnboardingStatus])

    promote_cmd = sub.add_parser("promote", help="Make a profile an active admin")
    promote_cmd.add_argument("--email", required=True)

    status_cmd = sub.add_parser("status", help="Move a profile through onboarding")
    status_cmd.add_argument("--email", required=True)
    status_cmd.add_argument("--to", required=True, choices=[s.value for s in OnboardingStatus])

    args = parser.parse_args()

    if args.command == "list":
        asyncio.run(list_profiles(args.status))
    elif args.command == "promote":
        sys.exit(asyncio.run(promote(args.email)))
    elif args.command == "status":
        sys.exit(asyncio.run(set_status(args.email, args.to)))
    else:
        print("❗ Usage:")
        print("  python -m scripts.manage_profiles list --status pending")
        print("  python -m scripts.manage_profiles promote --email owner@vendorhub.in")
        print("  python -m scripts.manage_profiles status --email chai@vendorhub.in --to active")
