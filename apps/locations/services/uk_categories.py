#!/usr/bin/env python3
"""UK location categories with curated seed queries"""

from typing import Dict, List, Optional

from apps.locations.schemas.reference import UKLocationCategory

_LANDMARK_SEEDS = (
    "Big Ben",
    "Buckingham Palace",
    "Stonehenge",
    "London Eye",
    "Wembley Stadium",
    "O2 Arena",
    "Eden Project",
)

_HERITAGE_SEEDS = (
    "Windsor Castle",
    "Tower of London",
    "Tower Bridge",
    "London Bridge",
    "Westminster Abbey",
    "St Paul's Cathedral",
    "Trafalgar Square",
    "Piccadilly Circus",
    "Covent Garden",
    "Camden Market",
    "Portobello Road Market",
    "Borough Market",
    "Hyde Park",
    "Regent's Park",
    "Kensington Palace",
    "Hampton Court Palace",
    "Chatsworth House",
    "Blenheim Palace",
    "Alnwick Castle",
    "Edinburgh Castle",
    "Stirling Castle",
    "Eilean Donan Castle",
    "Caernarfon Castle",
    "Warwick Castle",
    "Leeds Castle",
    "Dover Castle",
    "Bamburgh Castle",
    "Arundel Castle",
    "Highclere Castle",
    "Balmoral Castle",
    "Holyrood Palace",
    "Palace of Holyroodhouse",
    "Royal Mile Edinburgh",
    "Arthur's Seat",
    "Calton Hill",
    "Princes Street Gardens",
    "Royal Botanic Gardens Edinburgh",
    "Scott Monument",
    "National Gallery of Scotland",
    "Scottish National Gallery",
    "Royal Yacht Britannia",
    "Dynamic Earth",
    "Camera Obscura",
    "Edinburgh Zoo",
    "Royal Observatory Greenwich",
    "Cutty Sark",
    "Greenwich Park",
    "Old Royal Naval College",
    "Queen's House",
    "National Maritime Museum",
    "Royal Observatory",
    "Prime Meridian",
    "Greenwich Mean Time",
    "Canary Wharf",
    "Docklands",
    "London Docklands",
    "ExCeL London",
    "Olympic Park",
    "Queen Elizabeth Olympic Park",
    "Stratford",
    "Westfield Stratford",
    "Westfield London",
)

_SHOPPING_SEEDS = (
    "Bluewater",
    "Trafford Centre",
    "Meadowhall",
    "Metrocentre",
    "Brent Cross",
    "White Rose Centre",
    "Lakeside",
    "Intu Watford",
    "Intu Braehead",
    "Intu Victoria Centre",
    "Intu Eldon Square",
    "Intu Merry Hill",
    "Intu Derby",
    "Intu Potteries",
    "Intu Trafford Centre",
    "Intu Lakeside",
    "Intu Watford",
    "Intu Braehead",
)

_GLASGOW_EDINBURGH_MUSEUMS = (
    "Museum of Edinburgh",
    "Museum of Transport",
    "Riverside Museum",
    "People's Palace",
    "Tenement House",
    "Provand's Lordship",
    "St Mungo Museum",
    "Gallery of Modern Art",
    "Museum of Religious Life",
    "Museum of Piping",
    "Museum of Childhood",
)

UK_LOCATION_CATEGORIES: List[UKLocationCategory] = [
    UKLocationCategory(
        id="airports",
        name="Airports",
        icon="✈️",
        search_queries=(
            "Heathrow Airport",
            "Gatwick Airport",
            "Stansted Airport",
            "Luton Airport",
            "Manchester Airport",
            "Birmingham Airport",
            "Edinburgh Airport",
            "Glasgow Airport",
            "Bristol Airport",
            "Newcastle Airport",
            "Liverpool Airport",
            "Leeds Bradford Airport",
            "East Midlands Airport",
            "Doncaster Sheffield Airport",
            "Cardiff Airport",
            "Belfast International Airport",
            "Aberdeen Airport",
            "Southampton Airport",
            "Bournemouth Airport",
            "Exeter Airport",
            "London City Airport",
            "Southend Airport",
            "Norwich Airport",
            "Humberside Airport",
            "Durham Tees Valley Airport",
            "Blackpool Airport",
            "Prestwick Airport",
            "Inverness Airport",
            "Isle of Man Airport",
            "Jersey Airport",
            "Guernsey Airport",
        ),
        types=("poi",),
        description="UK airports and aerodromes",
    ),
    UKLocationCategory(
        id="train_stations",
        name="Train Stations",
        icon="🚆",
        search_queries=(
            "King's Cross Station",
            "Paddington Station",
            "Victoria Station",
            "Waterloo Station",
            "Euston Station",
            "Liverpool Street Station",
            "St Pancras Station",
            "Charing Cross Station",
            "London Bridge Station",
            "Manchester Piccadilly Station",
            "Birmingham New Street Station",
            "Edinburgh Waverley Station",
            "Glasgow Central Station",
            "Bristol Temple Meads Station",
            "Newcastle Central Station",
            "Liverpool Lime Street Station",
            "Leeds Station",
            "Sheffield Station",
            "Nottingham Station",
            "Cardiff Central Station",
            "Reading Station",
            "Brighton Station",
            "Bath Spa Station",
            "York Station",
            "Durham Station",
            "Cambridge Station",
            "Oxford Station",
            "Bristol Parkway Station",
            "Crewe Station",
            "Preston Station",
            "Carlisle Station",
            "Aberdeen Station",
            "Inverness Station",
        ),
        types=("poi",),
        description="UK railway stations",
    ),
    UKLocationCategory(
        id="tube_stations",
        name="Tube Stations",
        icon="🚇",
        search_queries=(
            "Leicester Square Underground",
            "Bank Underground",
            "Canary Wharf Underground",
            "Oxford Circus Underground",
            "Piccadilly Circus Underground",
            "Tottenham Court Road Underground",
            "Holborn Underground",
            "Covent Garden Underground",
            "Embankment Underground",
            "Westminster Underground",
            "Green Park Underground",
            "Hyde Park Corner Underground",
            "Knightsbridge Underground",
            "South Kensington Underground",
            "Earl's Court Underground",
            "Gloucester Road Underground",
            "Sloane Square Underground",
            "Victoria Underground",
            "Pimlico Underground",
            "Vauxhall Underground",
        ),
        types=("poi",),
        description="London Underground stations",
    ),
    UKLocationCategory(
        id="landmarks",
        name="Landmarks",
        icon="🏛️",
        search_queries=_LANDMARK_SEEDS + ("Natural History Museum",) + _HERITAGE_SEEDS + _SHOPPING_SEEDS,
        types=("poi",),
        description="Famous UK landmarks and attractions",
    ),
    UKLocationCategory(
        id="hospitals",
        name="Hospitals",
        icon="🏥",
        search_queries=(
            "Guy's Hospital",
            "St Thomas' Hospital",
            "King's College Hospital",
            "University College Hospital",
            "Royal London Hospital",
            "Barts Hospital",
            "Manchester Royal Infirmary",
            "Birmingham Queen Elizabeth Hospital",
            "Edinburgh Royal Infirmary",
            "Glasgow Royal Infirmary",
            "Bristol Royal Infirmary",
            "Newcastle Royal Victoria Infirmary",
            "Liverpool Royal Hospital",
            "Leeds General Infirmary",
            "Sheffield Northern General Hospital",
            "Nottingham City Hospital",
            "Cardiff University Hospital",
            "Belfast Royal Victoria Hospital",
            "Aberdeen Royal Infirmary",
            "Southampton General Hospital",
        ),
        types=("poi",),
        description="UK hospitals and medical facilities",
    ),
    UKLocationCategory(
        id="universities",
        name="Universities",
        icon="🎓",
        search_queries=(
            "University College London",
            "University of Oxford",
            "University of Cambridge",
            "Imperial College London",
            "London School of Economics",
            "King's College London",
            "Queen Mary University of London",
            "University of Manchester",
            "University of Birmingham",
            "University of Edinburgh",
            "University of Glasgow",
            "University of Bristol",
            "University of Newcastle",
            "University of Liverpool",
            "University of Leeds",
            "University of Sheffield",
            "University of Nottingham",
            "Cardiff University",
            "Queen's University Belfast",
            "University of Aberdeen",
        ),
        types=("poi",),
        description="UK universities and colleges",
    ),
    UKLocationCategory(
        id="shopping_centres",
        name="Shopping Centres",
        icon="🛍️",
        search_queries=("Westfield London", "Westfield Stratford") + _SHOPPING_SEEDS,
        types=("poi",),
        description="UK shopping centres and malls",
    ),
    UKLocationCategory(
        id="hotels",
        name="Hotels",
        icon="🏨",
        search_queries=(
            "The Ritz London",
            "Claridge's Hotel",
            "The Savoy Hotel",
            "The Dorchester",
            "The Connaught",
            "Brown's Hotel",
            "The Berkeley",
            "The Goring",
            "The Langham",
            "The Lanesborough",
            "Mandarin Oriental Hyde Park",
            "Park Lane Hotel",
            "Grosvenor House Hotel",
            "The May Fair Hotel",
            "The Berkeley Hotel",
            "The Connaught Hotel",
            "The Goring Hotel",
            "The Langham Hotel",
            "The Lanesborough Hotel",
            "Mandarin Oriental Hotel",
        ),
        types=("poi",),
        description="UK hotels and accommodation",
    ),
    UKLocationCategory(
        id="restaurants",
        name="Restaurants",
        icon="🍽️",
        search_queries=(
            "Nando's",
            "Wagamama",
            "Dishoom",
            "The Ivy",
            "Gordon Ramsay Restaurants",
            "Hakkasan",
            "Zuma",
            "Nobu",
            "Sketch",
            "Gymkhana",
            "Heddon Street Kitchen",
            "Sexy Fish",
            "Chiltern Firehouse",
            "The Wolseley",
            "The Delaunay",
            "The Ritz Restaurant",
            "Claridge's Restaurant",
            "The Savoy Grill",
            "The Dorchester Grill",
            "The Connaught Grill",
        ),
        types=("poi",),
        description="UK restaurants and dining",
    ),
    UKLocationCategory(
        id="parks",
        name="Parks",
        icon="🌳",
        search_queries=(
            "Hyde Park",
            "Richmond Park",
            "Hampstead Heath",
            "Regent's Park",
            "Green Park",
            "St James's Park",
            "Kensington Gardens",
            "Battersea Park",
            "Victoria Park",
            "Clapham Common",
            "Wimbledon Common",
            "Putney Heath",
            "Wormwood Scrubs",
            "Holland Park",
            "Kew Gardens",
            "Royal Botanic Gardens",
            "Crystal Palace Park",
            "Alexandra Palace Park",
            "Finsbury Park",
            "Brockwell Park",
        ),
        types=("poi",),
        description="UK parks and green spaces",
    ),
    UKLocationCategory(
        id="museums",
        name="Museums",
        icon="🏛️",
        search_queries=(
            "British Museum",
            "Natural History Museum",
            "Science Museum",
            "Victoria and Albert Museum",
            "Tate Modern",
            "Tate Britain",
            "National Gallery",
            "National Portrait Gallery",
            "Imperial War Museum",
            "Museum of London",
            "Design Museum",
            "Horniman Museum",
            "Dulwich Picture Gallery",
            "Wallace Collection",
            "Sir John Soane's Museum",
            "Geffrye Museum",
            "Museum of the Home",
            "Garden Museum",
            "Fashion and Textile Museum",
            "Cartoon Museum",
            "Ashmolean Museum",
            "Pitt Rivers Museum",
            "Fitzwilliam Museum",
            "Scottish National Gallery",
            "Scottish National Portrait Gallery",
            "Scottish National Museum",
            "Kelvingrove Art Gallery",
            "Hunterian Museum",
            "National Museum of Scotland",
            "Royal Museum",
        )
        + _GLASGOW_EDINBURGH_MUSEUMS
        + _GLASGOW_EDINBURGH_MUSEUMS,
        types=("poi",),
        description="UK museums and galleries",
    ),
    UKLocationCategory(
        id="famous_places",
        name="Famous Places",
        icon="⭐",
        search_queries=_LANDMARK_SEEDS + _HERITAGE_SEEDS + _SHOPPING_SEEDS,
        types=("poi",),
        description="Famous UK landmarks and popular places",
    ),
]

_CATEGORIES_BY_ID: Dict[str, UKLocationCategory] = {c.id: c for c in UK_LOCATION_CATEGORIES}


def get_categories() -> List[UKLocationCategory]:
    """Full catalog in registry order"""
    return list(UK_LOCATION_CATEGORIES)


def find_category(category_id: str) -> Optional[UKLocationCategory]:
    return _CATEGORIES_BY_ID.get(category_id)
