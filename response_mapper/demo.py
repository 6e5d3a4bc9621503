"""Sample positional response used when the UI runs in demo mode.

Each row is one property: id, property code, type, region, room count,
brand, then daily figures, with occupancy (percent) at index 19.
"""
from __future__ import annotations

DEMO_COLUMNS = (
    'id', 'property_code', 'type', 'region', 'room_count', 'brand', 'city', 'state',
    'opened', 'rooms_sold', 'rooms_ooo', 'room_revenue', 'fb_revenue', 'other_revenue',
    'total_revenue', 'adr', 'revpar', 'arrivals', 'departures', 'occupancy',
)

DEMO_RESPONSE = [
    [1, 'RENEW', 'Hotel', 'West', 72, 'Independent', 'Honolulu', 'HI', '2011-06-01',
     52, 0, 9360.0, 1200.5, 310.0, 10870.5, 180.0, 130.0, 21, 19, 72.4],
    [2, 'HNLMC', 'Resort', 'West', 1310, 'Marriott', 'Honolulu', 'HI', '2001-03-15',
     1114, 12, 300780.0, 41250.0, 9800.0, 351830.0, 270.0, 229.6, 402, 388, 85.0],
    [3, 'ABQMC', 'Hotel', 'Southwest', 411, 'Marriott', 'Albuquerque', 'NM', '1982-09-01',
     259, 4, 38850.0, 6100.0, 950.0, 45900.0, 150.0, 94.5, 88, 95, 63.0],
    [4, 'CIDMC', 'Hotel', 'Midwest', 221, 'Marriott', 'Cedar Rapids', 'IA', '1986-05-20',
     152, 2, 20520.0, 3050.0, 400.0, 23970.0, 135.0, 92.9, 61, 57, 68.8],
    [5, 'ZZTOP', 'Motel', 'South', 48, 'Independent', 'Austin', 'TX', '1975-01-01',
     30, 0, 2400.0, 0.0, 55.0, 2455.0, 80.0, 50.0, 14, 12, 62.5],
]
