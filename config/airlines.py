"""
Airline reference data.

Personal-item limits for the airlines loaded into an empty database.
All dimensions are in centimeters (inch source values noted alongside).
"""

# =============================================================================
# REFERENCE AIRLINES
# =============================================================================
# verification_status:
#   VERIFIED_OFFICIAL        - confirmed against the airline's published policy
#   UNVERIFIED_CONSERVATIVE  - airline publishes no limit; smallest value seen
#                              across sources is used

REFERENCE_AIRLINES = [
    {
        "name": "American Airlines",
        "iata_code": "AA",
        "max_personal_item_length_cm": 45.72,  # 18 in
        "max_personal_item_width_cm": 35.56,   # 14 in
        "max_personal_item_height_cm": 20.32,  # 8 in
        "verification_status": "VERIFIED_OFFICIAL",
        "source_url": "https://www.aa.com/i18n/travel-info/baggage/carry-on-baggage.jsp",
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 45.72,
        "pet_carrier_max_width_cm": 35.56,
        "pet_carrier_max_height_cm": 20.32,
    },
    {
        "name": "United Airlines",
        "iata_code": "UA",
        "max_personal_item_length_cm": 43.18,  # 17 in
        "max_personal_item_width_cm": 25.40,   # 10 in
        "max_personal_item_height_cm": 22.86,  # 9 in
        "verification_status": "VERIFIED_OFFICIAL",
        "source_url": "https://www.united.com/ual/en/us/fly/travel/baggage/carry-on.html",
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 43.18,
        "pet_carrier_max_width_cm": 25.40,
        "pet_carrier_max_height_cm": 22.86,
    },
    {
        "name": "Southwest Airlines",
        "iata_code": "WN",
        "max_personal_item_length_cm": 46.99,  # 18.5 in
        "max_personal_item_width_cm": 34.29,   # 13.5 in
        "max_personal_item_height_cm": 21.59,  # 8.5 in
        "verification_status": "VERIFIED_OFFICIAL",
        "source_url": "https://www.southwest.com/help/baggage/carryon-bags",
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 46.99,
        "pet_carrier_max_width_cm": 34.29,
        "pet_carrier_max_height_cm": 21.59,
    },
    {
        "name": "Delta Air Lines",
        "iata_code": "DL",
        "max_personal_item_length_cm": 40.64,  # 16 in
        "max_personal_item_width_cm": 30.48,   # 12 in
        "max_personal_item_height_cm": 15.24,  # 6 in
        "verification_status": "UNVERIFIED_CONSERVATIVE",
        "source_url": "https://www.delta.com/us/en/baggage/carry-on-baggage",
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 40.64,
        "pet_carrier_max_width_cm": 30.48,
        "pet_carrier_max_height_cm": 15.24,
        "conflict_notes": "Conservative estimate based on various sources. Please verify with airline.",
    },
    {
        "name": "JetBlue Airways",
        "iata_code": "B6",
        "max_personal_item_length_cm": 43.18,  # 17 in
        "max_personal_item_width_cm": 33.02,   # 13 in
        "max_personal_item_height_cm": 20.32,  # 8 in
        "verification_status": "VERIFIED_OFFICIAL",
        "source_url": "https://www.jetblue.com/travel/baggage",
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 43.18,
        "pet_carrier_max_width_cm": 33.02,
        "pet_carrier_max_height_cm": 20.32,
    },
    {
        "name": "Frontier Airlines",
        "iata_code": "F9",
        "max_personal_item_length_cm": 45.72,  # 18 in
        "max_personal_item_width_cm": 35.56,   # 14 in
        "max_personal_item_height_cm": 20.32,  # 8 in
        "verification_status": "VERIFIED_OFFICIAL",
        "source_url": "https://www.flyfrontier.com/travel/baggage/",
        "pet_carrier_allowed": True,
        "pet_carrier_max_length_cm": 45.72,
        "pet_carrier_max_width_cm": 35.56,
        "pet_carrier_max_height_cm": 20.32,
    },
]
