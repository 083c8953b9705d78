# Supabase table: public.profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# The table, policies and triggers are created by supabase/migrations

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id, on delete cascade)
- name: text (nullable)
- bio: text (nullable)
- created_at: timestamptz (default: now(), not null)
- updated_at: timestamptz (default: now(), not null) - bumped by the
  profiles_updated_at trigger on every update

Row Level Security is enabled; every policy is "auth.uid() = id", so a
request made with a user's JWT can only see and change that user's row.
A row is inserted for every new auth.users row by the on_auth_user_created
trigger, which is why the API never inserts profiles itself.
"""

PROFILES_TABLE = "profiles"
