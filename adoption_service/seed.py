import logging
from sqlalchemy.orm import Session, sessionmaker

from shared.core.config import settings
from shared.core.database import Base, build_engine, build_session_factory, transaction
from shared.core.log_config import setup_logging
from adoption_service.app.models import Space

logger = logging.getLogger(__name__)

CAMERETTA = (
    "Ikea ci ha regalato i lettini e con il tuo contributo arrederemo la stanza con "
    "scrivanie, sedie, due mobili, comodini e un bel tappeto accogliente"
)

SAMPLE_SPACES = [
    {
        "name": "Bagno 1",
        "description": "Contribuirai ad arredare il bagno con lavandino, tazza, bidet e piatto "
                       "doccia (se rimane qualcosa compreremo anche degli asciugamani nuovi)",
        "cost": 3000,
    },
    {
        "name": "Vacanza",
        "description": "Manderemo i bambini in gita per qualche giorno durante il trasloco e "
                       "pagherai le loro vacanze dell'anno nuovo durante questo momento di cambiamento",
        "cost": 5000,
    },
    {"name": "Cameretta 1", "description": CAMERETTA, "cost": 3000},
    {"name": "Cameretta 2", "description": CAMERETTA, "cost": 3000},
    {"name": "Cameretta 3", "description": CAMERETTA, "cost": 3000},
    {"name": "Cameretta 4", "description": CAMERETTA, "cost": 3000},
    {"name": "Cameretta 5", "description": CAMERETTA, "cost": 3000},
    {
        "name": "Cucina - Elettrodomestici (frigo e forno)",
        "description": "Elettrodomestici essenziali per la cucina: frigo e forno per preparare pasti nutrienti",
        "cost": 3000,
    },
    {
        "name": "Lavanderia - Lavatrici",
        "description": "Lavatrici professionali per garantire vestiti sempre puliti e profumati",
        "cost": 2000,
    },
    {
        "name": "Lavanderia - Asciugatrici",
        "description": "Asciugatrici efficienti per completare il ciclo di cura degli indumenti",
        "cost": 3000,
    },
    {
        "name": "Cucina - Elettrodomestici (fuochi, cappa e robot)",
        "description": "Piano cottura, cappa aspirante e robot da cucina per cucinare insieme",
        "cost": 3000,
    },
    {
        "name": "Cucina - Mobili e pensili",
        "description": "Mobili e pensili per organizzare e riporre tutto il necessario in cucina",
        "cost": 3000,
    },
    {
        "name": "Cucina - Tavolo e sedie",
        "description": "Un grande tavolo con sedie dove condividere i pasti tutti insieme",
        "cost": 3000,
    },
    {
        "name": "Soggiorno e TV",
        "description": "Area relax con televisione per momenti di svago e condivisione",
        "cost": 3000,
    },
    {
        "name": "Divano e tappeto gioco",
        "description": "Divano comodo e tappeto morbido per giocare e rilassarsi insieme",
        "cost": 3000,
    },
    {
        "name": "Giardino",
        "description": "Attrezzature e arredi per il giardino, spazio all'aperto per giocare",
        "cost": 3000,
    },
    {
        "name": "Bagno 2",
        "description": "Secondo bagno completo per garantire comfort e privacy",
        "cost": 3000,
    },
    {
        "name": "Bagno 3",
        "description": "Terzo bagno per completare i servizi della struttura",
        "cost": 3000,
    },
    {
        "name": "Sala visite per incontri con i genitori",
        "description": "Spazio dedicato agli incontri con le famiglie d'origine dei bambini",
        "cost": 3000,
    },
    {
        "name": "Armadi e libreria",
        "description": "Armadi per organizzare vestiti e librerie per custodire libri e giochi",
        "cost": 3000,
    },
]


def seed_spaces(db: Session) -> int:
    """Insert the sample catalog into an empty spaces table. Returns rows added."""
    existing = db.query(Space).count()
    if existing:
        logger.info(f"📊 Found {existing} existing spaces, skipping seed")
        return 0

    with transaction(db):
        db.add_all(Space(**space) for space in SAMPLE_SPACES)

    logger.info(f"📦 Added {len(SAMPLE_SPACES)} sample spaces")
    return len(SAMPLE_SPACES)


def seed_data(session_factory: sessionmaker) -> int:
    db = session_factory()
    try:
        return seed_spaces(db)
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    seed_data(build_session_factory(engine))
