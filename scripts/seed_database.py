# scripts/seed_database.py
"""
Database seeding script.
Populates the database with categories and sample accounts, organizers, events
and participations for development.
"""

import argparse
import os
import random
import sys
from datetime import timedelta
from getpass import getpass

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from faker import Faker

from app import app
from volunteerhub.exceptions import AuthError, OrganizerProfileError
from volunteerhub.models import (
    Category,
    Event,
    EventParticipant,
    EventStatus,
    Organizer,
    ParticipantStatus,
    Profile,
    Role,
    User,
    VerificationStatus,
    db,
    utcnow,
)
from volunteerhub.services.auth_service import AuthService
from volunteerhub.services.onboarding_service import OnboardingService

fake = Faker()

SAMPLE_PASSWORD = "password123"

CATEGORIES = [
    ("Environment", "Cleanups, planting and conservation", "leaf"),
    ("Education", "Tutoring, mentoring and literacy", "book"),
    ("Health", "Blood drives, clinics and wellness", "heart"),
    ("Community", "Neighborhood projects and events", "users"),
    ("Animals", "Shelters and wildlife rescue", "paw"),
    ("Food Security", "Food banks and meal services", "utensils"),
]

EVENT_TITLES = {
    "Environment": ["Beach Cleanup", "Tree Planting Day", "River Restoration"],
    "Education": ["Homework Help Night", "Library Reading Hour", "Career Mentoring"],
    "Health": ["Community Blood Drive", "Wellness Fair Setup"],
    "Community": ["Park Mural Painting", "Neighborhood Block Party"],
    "Animals": ["Shelter Dog Walking", "Adoption Day Helpers"],
    "Food Security": ["Food Bank Sorting", "Holiday Meal Service"],
}

# Statistics tracking
stats = {
    "categories": 0,
    "admins": 0,
    "organizers": 0,
    "volunteers": 0,
    "events": 0,
    "participations": 0,
    "errors": [],
}


def clear_database():
    """Clear all seeded data from the database, keeping admin accounts"""
    print("Clearing existing data...")
    with app.app_context():
        try:
            # Delete in reverse order of dependencies
            EventParticipant.query.delete()
            Event.query.delete()
            Organizer.query.delete()
            non_admin_ids = [p.id for p in Profile.query.filter(Profile.role != Role.ADMIN).all()]
            if non_admin_ids:
                Profile.query.filter(Profile.id.in_(non_admin_ids)).delete(synchronize_session=False)
                User.query.filter(User.id.in_(non_admin_ids)).delete(synchronize_session=False)
            Category.query.delete()
            db.session.commit()
            print("✅ Database cleared")
        except Exception as e:
            db.session.rollback()
            print(f"❌ Error clearing database: {str(e)}")
            sys.exit(1)


def seed_categories(dry_run=False):
    """Create the event categories"""
    print("\n📝 Seeding categories...")
    categories = []
    for name, description, icon in CATEGORIES:
        if dry_run:
            print(f"  [DRY RUN] Would create category: {name}")
            continue
        existing = Category.query.filter_by(name=name).first()
        if existing:
            print(f"  ⏭️  Category '{name}' already exists, skipping")
            categories.append(existing)
            continue
        category, error = Category.safe_create(name=name, description=description, icon=icon)
        if error:
            stats["errors"].append(f"Category {name}: {error}")
            print(f"  ❌ Error creating category {name}: {error}")
            continue
        stats["categories"] += 1
        categories.append(category)
        print(f"  ✅ Created category: {name}")
    return categories


def seed_admin_user(email="admin@example.com", password=None, dry_run=False):
    """Create the admin account"""
    print("\n📝 Seeding admin user...")

    if dry_run:
        print(f"  [DRY RUN] Would create admin user: {email}")
        return None

    existing = User.find_by_email(email)
    if existing:
        print(f"  ⏭️  Admin user '{email}' already exists, skipping")
        return existing

    try:
        admin = AuthService.sign_up(email, password or "admin123", "Site Admin", Role.ADMIN)
    except AuthError as e:
        stats["errors"].append(f"Admin user: {e}")
        print(f"  ❌ Error creating admin user: {e}")
        return None

    stats["admins"] += 1
    print(f"  ✅ Created admin user: {email}")
    return admin


def seed_organizers(admin, count=4, dry_run=False):
    """Create organizer accounts; most are approved, the last one stays pending"""
    print("\n📝 Seeding organizers...")
    organizers = []
    for i in range(count):
        email = f"organizer{i + 1}@example.com"
        if dry_run:
            print(f"  [DRY RUN] Would create organizer: {email}")
            continue
        if User.find_by_email(email):
            print(f"  ⏭️  Organizer '{email}' already exists, skipping")
            continue
        company = fake.company()
        try:
            _user, organizer = OnboardingService.register_organizer(
                email=email,
                password=SAMPLE_PASSWORD,
                full_name=fake.name(),
                organization_name=company,
                contact_email=f"contact{i + 1}@example.com",
                description=fake.catch_phrase(),
            )
        except (AuthError, OrganizerProfileError) as e:
            stats["errors"].append(f"Organizer {email}: {e}")
            print(f"  ❌ Error creating organizer {email}: {e}")
            continue

        if i < count - 1:
            organizer.verification_status = VerificationStatus.APPROVED
            organizer.verified_at = utcnow()
            organizer.verified_by = admin.id if admin else None
            db.session.commit()

        stats["organizers"] += 1
        organizers.append(organizer)
        print(f"  ✅ Created organizer: {company} ({organizer.verification_status.value})")
    return organizers


def seed_volunteers(count=10, dry_run=False):
    """Create volunteer accounts"""
    print("\n📝 Seeding volunteers...")
    volunteers = []
    for i in range(count):
        email = f"volunteer{i + 1}@example.com"
        if dry_run:
            print(f"  [DRY RUN] Would create volunteer: {email}")
            continue
        if User.find_by_email(email):
            print(f"  ⏭️  Volunteer '{email}' already exists, skipping")
            continue
        try:
            user = OnboardingService.register_volunteer(email, SAMPLE_PASSWORD, fake.name())
        except AuthError as e:
            stats["errors"].append(f"Volunteer {email}: {e}")
            print(f"  ❌ Error creating volunteer {email}: {e}")
            continue
        stats["volunteers"] += 1
        volunteers.append(user)
    print(f"  ✅ Created {len(volunteers)} volunteers")
    return volunteers


def seed_events(organizers, categories, admin, dry_run=False):
    """Create events across statuses, dated in the past and the future"""
    print("\n📝 Seeding events...")
    if dry_run or not categories:
        print("  [DRY RUN] Would create events for each approved organizer" if dry_run else "  ⏭️  No categories")
        return []

    events = []
    approved_organizers = [o for o in organizers if o.is_approved]
    for organizer in approved_organizers:
        for offset in (-20, -5, 3, 10, 21, 35):
            category = random.choice(categories)
            title = random.choice(EVENT_TITLES.get(category.name, ["Community Service Day"]))
            status = EventStatus.PENDING if offset == 35 else EventStatus.APPROVED
            event = Event(
                title=title,
                description=fake.paragraph(nb_sentences=4),
                organizer_id=organizer.id,
                category_id=category.id,
                event_date=utcnow().replace(minute=0, second=0, microsecond=0) + timedelta(days=offset),
                location=f"{fake.street_address()}, {fake.city()}",
                volunteers_needed=random.choice([5, 10, 15, 25]),
                status=status,
                approved_by=admin.id if admin and status == EventStatus.APPROVED else None,
                approved_at=utcnow() if status == EventStatus.APPROVED else None,
            )
            db.session.add(event)
            events.append(event)
    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        stats["errors"].append(f"Events: {e}")
        print(f"  ❌ Error creating events: {e}")
        return []

    stats["events"] += len(events)
    print(f"  ✅ Created {len(events)} events")
    return events


def seed_participations(events, volunteers, dry_run=False):
    """Join volunteers to approved events without exceeding capacity"""
    print("\n📝 Seeding participations...")
    if dry_run:
        print("  [DRY RUN] Would join volunteers to approved events")
        return

    now = utcnow()
    for event in events:
        if event.status != EventStatus.APPROVED or not volunteers:
            continue
        size = min(event.volunteers_needed - 1, random.randint(0, len(volunteers)))
        for volunteer in random.sample(volunteers, max(size, 0)):
            status = ParticipantStatus.COMPLETED if event.event_date < now else ParticipantStatus.JOINED
            db.session.add(
                EventParticipant(
                    event_id=event.id,
                    user_id=volunteer.id,
                    status=status,
                    completed_at=event.event_date if status == ParticipantStatus.COMPLETED else None,
                )
            )
            stats["participations"] += 1
    try:
        db.session.commit()
        print(f"  ✅ Created {stats['participations']} participations")
    except Exception as e:
        db.session.rollback()
        stats["errors"].append(f"Participations: {e}")
        print(f"  ❌ Error creating participations: {e}")


def seed_database(clear=False, admin_email="admin@example.com", admin_password=None, dry_run=False):
    """Main function to seed the database"""
    print("=" * 60)
    print("Database Seeding Script")
    print("=" * 60)

    if dry_run:
        print("\n⚠️  DRY RUN MODE - No changes will be made to the database\n")

    if clear and not dry_run:
        clear_database()

    with app.app_context():
        categories = seed_categories(dry_run)
        admin = seed_admin_user(admin_email, admin_password, dry_run)
        organizers = seed_organizers(admin, dry_run=dry_run)
        volunteers = seed_volunteers(dry_run=dry_run)
        events = seed_events(organizers, categories, admin, dry_run)
        seed_participations(events, volunteers, dry_run)

        # Print summary
        print("\n" + "=" * 60)
        print("Seeding Summary")
        print("=" * 60)
        print(f"Categories: {stats['categories']}")
        print(f"Admins: {stats['admins']}")
        print(f"Organizers: {stats['organizers']}")
        print(f"Volunteers: {stats['volunteers']}")
        print(f"Events: {stats['events']}")
        print(f"Participations: {stats['participations']}")

        if stats["errors"]:
            print(f"\n⚠️  Errors encountered: {len(stats['errors'])}")
            for error in stats["errors"][:10]:
                print(f"  - {error}")
            if len(stats["errors"]) > 10:
                print(f"  ... and {len(stats['errors']) - 10} more errors")
        else:
            print("\n✅ Seeding completed successfully!")

        if not dry_run:
            print("\nDefault credentials:")
            print(f"  Admin: {admin_email} / {admin_password or 'admin123'}")
            print(f"  Organizers and volunteers: <email> / {SAMPLE_PASSWORD}")


def main():
    """Command-line interface"""
    parser = argparse.ArgumentParser(description="Seed the database with sample data")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing data (except admins) before seeding",
    )
    parser.add_argument(
        "--admin-email",
        default="admin@example.com",
        help="Admin email (default: admin@example.com)",
    )
    parser.add_argument(
        "--admin-password",
        help="Admin password (default: admin123, will prompt if not provided)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without actually creating",
    )

    args = parser.parse_args()

    admin_password = args.admin_password
    if not admin_password and not args.dry_run:
        admin_password = getpass("Enter admin password (or press Enter for 'admin123'): ")
        if not admin_password:
            admin_password = "admin123"

    seed_database(
        clear=args.clear,
        admin_email=args.admin_email,
        admin_password=admin_password,
        dry_run=args.dry_run,
    )


if __name__ == "__main__":
    main()
