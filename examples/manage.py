#!/usr/bin/env python
"""
Blog example: serves tweets, users, tags and emailBlast at /graphql/.

    pip install -e ..
    python manage.py runserver
"""

import os
import sys


def main():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blog.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
