# =============================================================================
# fuego_core/data/__init__.py
# Reservation entity, menu catalog and Supabase gateway
# =============================================================================
