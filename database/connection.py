import os
import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, scoped_session
from sqlalchemy.engine.url import URL, make_url
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Setup Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("database.connection")


def get_connection_url():
    """
    Builds the database URL from the environment.
    DATABASE_URL wins when set; otherwise DB_ENGINE and friends are used
    (the game servers usually share a MySQL/MariaDB schema with the panel).
    """
    if os.getenv("DATABASE_URL"):
        return make_url(os.getenv("DATABASE_URL"))

    engine_type = os.getenv("DB_ENGINE", "sqlite").lower()

    if engine_type == "sqlite":
        db_name = os.getenv("DB_NAME", "op_panel.db")

        # /project/database/instance/<db_name>
        current_dir = os.path.dirname(os.path.abspath(__file__))
        instance_dir = os.path.join(current_dir, "instance")

        if not os.path.exists(instance_dir):
            try:
                os.makedirs(instance_dir, exist_ok=True)
                logger.info(f"Created SQLite instance directory: {instance_dir}")
            except OSError as e:
                logger.error(f"Could not create database directory: {e}")
                raise

        return f"sqlite:///{os.path.join(instance_dir, db_name)}"

    driver_map = {
        'postgresql': 'postgresql+psycopg2',
        'mysql': 'mysql+pymysql',
        'mariadb': 'mysql+pymysql',
    }
    driver = driver_map.get(engine_type, engine_type)

    return URL.create(
        drivername=driver,
        username=os.getenv("DB_USER"),
        password=os.getenv("DB_PASSWORD"),
        host=os.getenv("DB_HOST"),
        port=int(os.getenv("DB_PORT")) if os.getenv("DB_PORT") else None,
        database=os.getenv("DB_NAME")
    )


def create_app_engine():
    """
    Configures the SQLAlchemy Engine with dialect-specific options.
    """
    url = make_url(get_connection_url())
    backend = url.get_backend_name()

    kwargs = {
        'echo': os.getenv("DB_ECHO", "False").lower() == 'true',
    }

    if backend == "sqlite":
        # Allow multi-threaded access for web servers
        kwargs['connect_args'] = {'check_same_thread': False, 'timeout': 60}
    else:
        # MySQL drops idle connections after wait_timeout
        kwargs['pool_pre_ping'] = True
        kwargs['pool_size'] = int(os.getenv("DB_POOL_SIZE", 5))
        kwargs['max_overflow'] = int(os.getenv("DB_MAX_OVERFLOW", 10))
        if backend == "mysql":
            kwargs['pool_recycle'] = 3600

    engine = create_engine(url, **kwargs)

    if backend == "sqlite":
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=DELETE")
            cursor.close()

    return engine


# Singleton Engine
engine = create_app_engine()

# Thread-local Session Registry (Scoped Session)
SessionLocal = scoped_session(sessionmaker(autocommit=False, autoflush=False, bind=engine))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
