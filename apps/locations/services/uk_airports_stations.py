#!/usr/bin/env python3
"""UK airports and railway stations with known terminals and platform groups"""

from typing import Dict, List, Mapping, Optional, Protocol, Sequence

from apps.locations.schemas.reference import KnownLocation, Terminal


class ReferenceDataset(Protocol):
    def find_location_by_id(self, location_id: str) -> Optional[KnownLocation]: ...

    def get_terminals_by_location_id(self, location_id: str) -> List[Terminal]: ...


UK_LOCATIONS: Dict[str, KnownLocation] = {
    # Airports
    "heathrow": KnownLocation("heathrow", "Heathrow Airport", "airport", "London", "TW6 1EW", 51.4700, -0.4543),
    "gatwick": KnownLocation("gatwick", "Gatwick Airport", "airport", "Crawley", "RH6 0NP", 51.1537, -0.1821),
    "stansted": KnownLocation("stansted", "Stansted Airport", "airport", "Stansted", "CM24 1QW", 51.8860, 0.2389),
    "luton": KnownLocation("luton", "Luton Airport", "airport", "Luton", "LU2 9LY", 51.8747, -0.3683),
    "london-city": KnownLocation("london-city", "London City Airport", "airport", "London", "E16 2PX", 51.5048, 0.0495),
    "manchester-airport": KnownLocation("manchester-airport", "Manchester Airport", "airport", "Manchester", "M90 1QX", 53.3588, -2.2727),
    "birmingham-airport": KnownLocation("birmingham-airport", "Birmingham Airport", "airport", "Birmingham", "B26 3QJ", 52.4539, -1.7480),
    "edinburgh-airport": KnownLocation("edinburgh-airport", "Edinburgh Airport", "airport", "Edinburgh", "EH12 9DN", 55.9500, -3.3725),
    "glasgow-airport": KnownLocation("glasgow-airport", "Glasgow Airport", "airport", "Paisley", "PA3 2SW", 55.8691, -4.4351),
    # Railway stations
    "kings-cross": KnownLocation("kings-cross", "London King's Cross", "train_station", "London", "N1 9AL", 51.5308, -0.1238),
    "st-pancras": KnownLocation("st-pancras", "London St Pancras International", "train_station", "London", "N1C 4QP", 51.5319, -0.1263),
    "paddington": KnownLocation("paddington", "London Paddington", "train_station", "London", "W2 1HQ", 51.5154, -0.1755),
    "euston": KnownLocation("euston", "London Euston", "train_station", "London", "NW1 2RT", 51.5282, -0.1337),
    "waterloo": KnownLocation("waterloo", "London Waterloo", "train_station", "London", "SE1 8SW", 51.5031, -0.1132),
    "victoria": KnownLocation("victoria", "London Victoria", "train_station", "London", "SW1V 1JU", 51.4952, -0.1441),
    "manchester-piccadilly": KnownLocation("manchester-piccadilly", "Manchester Piccadilly", "train_station", "Manchester", "M60 7RA", 53.4774, -2.2309),
    "birmingham-new-street": KnownLocation("birmingham-new-street", "Birmingham New Street", "train_station", "Birmingham", "B2 4QA", 52.4778, -1.8990),
    "edinburgh-waverley": KnownLocation("edinburgh-waverley", "Edinburgh Waverley", "train_station", "Edinburgh", "EH1 1BB", 55.9520, -3.1900),
}

UK_TERMINALS: Dict[str, List[Terminal]] = {
    "heathrow": [
        Terminal("heathrow-t2", "heathrow", "Terminal 2", "Heathrow Terminal 2 (The Queen's Terminal)", 51.4696, -0.4513, "terminal", "Star Alliance and Aer Lingus"),
        Terminal("heathrow-t3", "heathrow", "Terminal 3", "Heathrow Terminal 3", 51.4714, -0.4589, "terminal", "Long-haul and oneworld carriers"),
        Terminal("heathrow-t4", "heathrow", "Terminal 4", "Heathrow Terminal 4", 51.4598, -0.4465, "terminal", "SkyTeam and Gulf carriers"),
        Terminal("heathrow-t5", "heathrow", "Terminal 5", "Heathrow Terminal 5", 51.4723, -0.4888, "terminal", "British Airways and Iberia"),
    ],
    "gatwick": [
        Terminal("gatwick-north", "gatwick", "North Terminal", "Gatwick Airport North Terminal", 51.1610, -0.1770, "terminal", "easyJet, Emirates, BA long-haul"),
        Terminal("gatwick-south", "gatwick", "South Terminal", "Gatwick Airport South Terminal", 51.1565, -0.1608, "terminal", "Rail station interchange"),
    ],
    "stansted": [
        Terminal("stansted-main", "stansted", "Main Terminal", "Stansted Airport Terminal", 51.8890, 0.2626, "terminal"),
    ],
    "luton": [
        Terminal("luton-main", "luton", "Main Terminal", "Luton Airport Terminal", 51.8786, -0.3760, "terminal"),
    ],
    "london-city": [
        Terminal("london-city-main", "london-city", "Main Terminal", "London City Airport Terminal", 51.5038, 0.0553, "terminal"),
    ],
    "manchester-airport": [
        Terminal("manchester-t1", "manchester-airport", "Terminal 1", "Manchester Airport Terminal 1", 53.3650, -2.2727, "terminal"),
        Terminal("manchester-t2", "manchester-airport", "Terminal 2", "Manchester Airport Terminal 2", 53.3662, -2.2700, "terminal"),
        Terminal("manchester-t3", "manchester-airport", "Terminal 3", "Manchester Airport Terminal 3", 53.3620, -2.2722, "terminal"),
    ],
    "birmingham-airport": [
        Terminal("birmingham-main", "birmingham-airport", "Main Terminal", "Birmingham Airport Terminal", 52.4529, -1.7337, "terminal"),
    ],
    "edinburgh-airport": [
        Terminal("edinburgh-main", "edinburgh-airport", "Main Terminal", "Edinburgh Airport Terminal", 55.9486, -3.3640, "terminal"),
    ],
    "kings-cross": [
        Terminal("kings-cross-main", "kings-cross", "Platforms 0-8", "King's Cross Main Train Shed", 51.5320, -0.1233, "platform", "East Coast Main Line"),
        Terminal("kings-cross-west", "kings-cross", "Platforms 9-11", "King's Cross Western Range", 51.5322, -0.1245, "platform", "Suburban services"),
    ],
    "st-pancras": [
        Terminal("st-pancras-intl", "st-pancras", "International Platforms", "St Pancras Eurostar Platforms 5-10", 51.5316, -0.1261, "platform", "Eurostar"),
        Terminal("st-pancras-domestic", "st-pancras", "Domestic Platforms", "St Pancras Platforms 1-4 and 11-13", 51.5325, -0.1268, "platform", "Midland Main Line and Southeastern high speed"),
    ],
    "paddington": [
        Terminal("paddington-main", "paddington", "Platforms 1-14", "Paddington Main Station", 51.5160, -0.1770, "platform", "Great Western Railway"),
        Terminal("paddington-elizabeth", "paddington", "Elizabeth line", "Paddington Elizabeth line Platforms", 51.5168, -0.1779, "platform"),
    ],
    "euston": [
        Terminal("euston-main", "euston", "Platforms 1-18", "Euston Main Concourse", 51.5287, -0.1339, "platform", "West Coast Main Line"),
    ],
    "manchester-piccadilly": [
        Terminal("piccadilly-main", "manchester-piccadilly", "Platforms 1-12", "Manchester Piccadilly Main Train Shed", 53.4776, -2.2300, "platform"),
        Terminal("piccadilly-through", "manchester-piccadilly", "Platforms 13-14", "Manchester Piccadilly Through Platforms", 53.4770, -2.2320, "platform"),
    ],
    "birmingham-new-street": [
        Terminal("new-street-main", "birmingham-new-street", "Platforms 1-12", "Birmingham New Street Grand Central Concourse", 52.4778, -1.8990, "platform"),
    ],
    # waterloo, victoria, edinburgh-waverley and glasgow-airport have no entries
}


class StaticReferenceDataset:
    """Read-only lookups over in-memory location and terminal mappings"""

    def __init__(
        self,
        locations: Mapping[str, KnownLocation] = UK_LOCATIONS,
        terminals: Mapping[str, Sequence[Terminal]] = UK_TERMINALS,
    ):
        self._locations = locations
        self._terminals = terminals

    def find_location_by_id(self, location_id: str) -> Optional[KnownLocation]:
        return self._locations.get(location_id)

    def get_terminals_by_location_id(self, location_id: str) -> List[Terminal]:
        return list(self._terminals.get(location_id, ()))


_default_dataset = StaticReferenceDataset()


def find_location_by_id(location_id: str) -> Optional[KnownLocation]:
    return _default_dataset.find_location_by_id(location_id)


def get_terminals_by_location_id(location_id: str) -> List[Terminal]:
    return _default_dataset.get_terminals_by_location_id(location_id)
