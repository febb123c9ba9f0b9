"""
Management command to create sample pubs.

Usage:
    python manage.py seed_pubs
    python manage.py seed_pubs --clear

Pubs are matched by title, so running the command twice does not
create duplicates.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.pubs.models import Pub
from apps.pubs.services import create_pub, delete_pub


SAMPLE_PUBS = [
    {
        'title': 'The Red Lion',
        'short_description': 'Traditional English pub',
        'long_description': 'A traditional British pub with great atmosphere and local ales.',
        'menu_url': 'https://redlion.example.com/menu',
        'image_url': 'https://redlion.example.com/image.jpg',
    },
    {
        'title': 'The Crown & Anchor',
        'short_description': 'Modern gastropub',
        'long_description': 'A modern pub with craft beers and gourmet food.',
        'menu_url': 'https://crownanchor.example.com/menu',
        'image_url': 'https://crownanchor.example.com/image.jpg',
    },
    {
        'title': 'The Old Oak',
        'short_description': 'Cozy neighborhood pub',
        'long_description': 'A cozy neighborhood pub with friendly staff and regular events.',
        'menu_url': 'https://oldoak.example.com/menu',
        'image_url': 'https://oldoak.example.com/image.jpg',
    },
    {
        'title': 'The Drunken Duck',
        'short_description': 'Riverside inn',
        'long_description': 'Riverside inn with a beer garden and a rotating cask selection.',
        'menu_url': '',
        'image_url': '',
    },
]


class Command(BaseCommand):
    help = 'Create sample pubs'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all pubs (with their reviews) before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing pubs...')
            for pub_id in list(Pub.objects.values_list('id', flat=True)):
                delete_pub(pub_id=pub_id)

        created = 0
        for data in SAMPLE_PUBS:
            if Pub.objects.filter(title=data['title']).exists():
                continue
            create_pub(**data)
            created += 1

        self.stdout.write(self.style.SUCCESS(f'Created {created} pub(s)'))
