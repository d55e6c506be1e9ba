# API Route Constants

# Entry page (login screen stand-in; redirect target carrying error/success indicators)
ENTRY_PAGE = '/'

# Base API
API_BASE = '/api'

# Auth routes
USER_REGISTER = f'{API_BASE}/register'
USER_LOGIN = f'{API_BASE}/login'
USER_LOGOUT = f'{API_BASE}/logout'

# Protected area
DASHBOARD = f'{API_BASE}/dashboard'

# Reservation routes
RESERVATION_BASE = f'{API_BASE}/reservations'
RESERVATION_CREATE = RESERVATION_BASE
