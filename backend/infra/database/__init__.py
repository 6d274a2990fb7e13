# Database module
from .connection import engine, get_session, init_db, close_db, check_connection, build_engine, db_lock, DATABASE_URL
from .schema import init_raw_db
