# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration (auth.users table)
# - Password hashing
# - Session issuance and refresh (access/refresh tokens)
# - JWT validation (auth.get_user)

"""
Supabase Auth calls used by AuthService:
- auth.sign_up() - signup
- auth.sign_in_with_password() - login
- auth.refresh_session() - refresh
- auth.admin.sign_out(jwt) - logout (revokes the caller's refresh tokens)
- auth.get_user(jwt) - resolve a bearer token to a user on every protected request

Signing up also creates the caller's public.profiles row through the
on_auth_user_created trigger (see supabase/migrations).
"""
