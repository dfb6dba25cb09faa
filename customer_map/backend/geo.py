"""
Country reference data for the globe.
Maps ISO 3166-1 alpha-2 codes to alpha-3 codes (used by the plotly polygon
layer), display names, and a representative point for the bubble.
"""

# ============================================================================
# Country Centroids
# alpha-2 -> (alpha-3, name, longitude, latitude); negative longitude = west
# ============================================================================
COUNTRY_CENTROIDS = {
    # North America
    'US': ('USA', 'United States', -98.5795, 39.8283),
    'CA': ('CAN', 'Canada', -106.3468, 56.1304),
    'MX': ('MEX', 'Mexico', -102.5528, 23.6345),
    'GT': ('GTM', 'Guatemala', -90.2308, 15.7835),
    'BZ': ('BLZ', 'Belize', -88.4976, 17.1899),
    'SV': ('SLV', 'El Salvador', -88.8965, 13.7942),
    'HN': ('HND', 'Honduras', -86.2419, 15.2000),
    'NI': ('NIC', 'Nicaragua', -85.2072, 12.8654),
    'CR': ('CRI', 'Costa Rica', -83.7534, 9.7489),
    'PA': ('PAN', 'Panama', -80.7821, 8.5380),
    'CU': ('CUB', 'Cuba', -77.7812, 21.5218),
    'JM': ('JAM', 'Jamaica', -77.2975, 18.1096),
    'HT': ('HTI', 'Haiti', -72.2852, 18.9712),
    'DO': ('DOM', 'Dominican Republic', -70.1627, 18.7357),
    'PR': ('PRI', 'Puerto Rico', -66.5901, 18.2208),
    'BS': ('BHS', 'Bahamas', -77.3963, 25.0343),
    'BB': ('BRB', 'Barbados', -59.5432, 13.1939),
    'TT': ('TTO', 'Trinidad and Tobago', -61.2225, 10.6918),
    'GL': ('GRL', 'Greenland', -42.6043, 71.7069),
    'BM': ('BMU', 'Bermuda', -64.7505, 32.3078),

    # South America
    'BR': ('BRA', 'Brazil', -51.9253, -14.2350),
    'AR': ('ARG', 'Argentina', -63.6167, -38.4161),
    'CL': ('CHL', 'Chile', -71.5430, -35.6751),
    'CO': ('COL', 'Colombia', -74.2973, 4.5709),
    'PE': ('PER', 'Peru', -75.0152, -9.1900),
    'VE': ('VEN', 'Venezuela', -66.5897, 6.4238),
    'EC': ('ECU', 'Ecuador', -78.1834, -1.8312),
    'BO': ('BOL', 'Bolivia', -63.5887, -16.2902),
    'PY': ('PRY', 'Paraguay', -58.4438, -23.4425),
    'UY': ('URY', 'Uruguay', -55.7658, -32.5228),
    'GY': ('GUY', 'Guyana', -58.9302, 4.8604),
    'SR': ('SUR', 'Suriname', -56.0278, 3.9193),

    # Europe
    'GB': ('GBR', 'United Kingdom', -3.4360, 55.3781),
    'IE': ('IRL', 'Ireland', -8.2439, 53.4129),
    'FR': ('FRA', 'France', 2.2137, 46.2276),
    'DE': ('DEU', 'Germany', 10.4515, 51.1657),
    'NL': ('NLD', 'Netherlands', 5.2913, 52.1326),
    'BE': ('BEL', 'Belgium', 4.4699, 50.5039),
    'LU': ('LUX', 'Luxembourg', 6.1296, 49.8153),
    'CH': ('CHE', 'Switzerland', 8.2275, 46.8182),
    'AT': ('AUT', 'Austria', 14.5501, 47.5162),
    'LI': ('LIE', 'Liechtenstein', 9.5554, 47.1660),
    'MC': ('MCO', 'Monaco', 7.4246, 43.7384),
    'ES': ('ESP', 'Spain', -3.7492, 40.4637),
    'PT': ('PRT', 'Portugal', -8.2245, 39.3999),
    'AD': ('AND', 'Andorra', 1.6016, 42.5463),
    'IT': ('ITA', 'Italy', 12.5674, 41.8719),
    'MT': ('MLT', 'Malta', 14.3754, 35.9375),
    'SM': ('SMR', 'San Marino', 12.4578, 43.9424),
    'GR': ('GRC', 'Greece', 21.8243, 39.0742),
    'CY': ('CYP', 'Cyprus', 33.4299, 35.1264),
    'DK': ('DNK', 'Denmark', 9.5018, 56.2639),
    'NO': ('NOR', 'Norway', 8.4689, 60.4720),
    'SE': ('SWE', 'Sweden', 18.6435, 60.1282),
    'FI': ('FIN', 'Finland', 25.7482, 61.9241),
    'IS': ('ISL', 'Iceland', -19.0208, 64.9631),
    'EE': ('EST', 'Estonia', 25.0136, 58.5953),
    'LV': ('LVA', 'Latvia', 24.6032, 56.8796),
    'LT': ('LTU', 'Lithuania', 23.8813, 55.1694),
    'PL': ('POL', 'Poland', 19.1451, 51.9194),
    'CZ': ('CZE', 'Czechia', 15.4730, 49.8175),
    'SK': ('SVK', 'Slovakia', 19.6990, 48.6690),
    'HU': ('HUN', 'Hungary', 19.5033, 47.1625),
    'SI': ('SVN', 'Slovenia', 14.9955, 46.1512),
    'HR': ('HRV', 'Croatia', 15.2000, 45.1000),
    'BA': ('BIH', 'Bosnia and Herzegovina', 17.6791, 43.9159),
    'RS': ('SRB', 'Serbia', 21.0059, 44.0165),
    'ME': ('MNE', 'Montenegro', 19.3744, 42.7087),
    'MK': ('MKD', 'North Macedonia', 21.7453, 41.6086),
    'AL': ('ALB', 'Albania', 20.1683, 41.1533),
    'XK': ('XKX', 'Kosovo', 20.9030, 42.6026),
    'RO': ('ROU', 'Romania', 24.9668, 45.9432),
    'BG': ('BGR', 'Bulgaria', 25.4858, 42.7339),
    'MD': ('MDA', 'Moldova', 28.3699, 47.4116),
    'UA': ('UKR', 'Ukraine', 31.1656, 48.3794),
    'BY': ('BLR', 'Belarus', 27.9534, 53.7098),
    'RU': ('RUS', 'Russia', 105.3188, 61.5240),

    # Middle East & Central Asia
    'TR': ('TUR', 'Turkey', 35.2433, 38.9637),
    'GE': ('GEO', 'Georgia', 43.3569, 42.3154),
    'AM': ('ARM', 'Armenia', 45.0382, 40.0691),
    'AZ': ('AZE', 'Azerbaijan', 47.5769, 40.1431),
    'IL': ('ISR', 'Israel', 34.8516, 31.0461),
    'PS': ('PSE', 'Palestine', 35.2332, 31.9522),
    'LB': ('LBN', 'Lebanon', 35.8623, 33.8547),
    'JO': ('JOR', 'Jordan', 36.2384, 30.5852),
    'SY': ('SYR', 'Syria', 38.9968, 34.8021),
    'IQ': ('IRQ', 'Iraq', 43.6793, 33.2232),
    'IR': ('IRN', 'Iran', 53.6880, 32.4279),
    'SA': ('SAU', 'Saudi Arabia', 45.0792, 23.8859),
    'AE': ('ARE', 'United Arab Emirates', 53.8478, 23.4241),
    'QA': ('QAT', 'Qatar', 51.1839, 25.3548),
    'BH': ('BHR', 'Bahrain', 50.5577, 26.0667),
    'KW': ('KWT', 'Kuwait', 47.4818, 29.3117),
    'OM': ('OMN', 'Oman', 55.9233, 21.5126),
    'YE': ('YEM', 'Yemen', 48.5164, 15.5527),
    'KZ': ('KAZ', 'Kazakhstan', 66.9237, 48.0196),
    'UZ': ('UZB', 'Uzbekistan', 64.5853, 41.3775),
    'TM': ('TKM', 'Turkmenistan', 59.5563, 38.9697),
    'KG': ('KGZ', 'Kyrgyzstan', 74.7661, 41.2044),
    'TJ': ('TJK', 'Tajikistan', 71.2761, 38.8610),
    'AF': ('AFG', 'Afghanistan', 67.7100, 33.9391),

    # South & East Asia
    'PK': ('PAK', 'Pakistan', 69.3451, 30.3753),
    'IN': ('IND', 'India', 78.9629, 20.5937),
    'BD': ('BGD', 'Bangladesh', 90.3563, 23.6850),
    'LK': ('LKA', 'Sri Lanka', 80.7718, 7.8731),
    'NP': ('NPL', 'Nepal', 84.1240, 28.3949),
    'BT': ('BTN', 'Bhutan', 90.4336, 27.5142),
    'MV': ('MDV', 'Maldives', 73.2207, 3.2028),
    'CN': ('CHN', 'China', 104.1954, 35.8617),
    'HK': ('HKG', 'Hong Kong', 114.1095, 22.3964),
    'MO': ('MAC', 'Macao', 113.5439, 22.1987),
    'TW': ('TWN', 'Taiwan', 120.9605, 23.6978),
    'MN': ('MNG', 'Mongolia', 103.8467, 46.8625),
    'JP': ('JPN', 'Japan', 138.2529, 36.2048),
    'KR': ('KOR', 'South Korea', 127.7669, 35.9078),
    'KP': ('PRK', 'North Korea', 127.5101, 40.3399),
    'VN': ('VNM', 'Vietnam', 108.2772, 14.0583),
    'TH': ('THA', 'Thailand', 100.9925, 15.8700),
    'LA': ('LAO', 'Laos', 102.4955, 19.8563),
    'KH': ('KHM', 'Cambodia', 104.9910, 12.5657),
    'MM': ('MMR', 'Myanmar', 95.9560, 21.9162),
    'MY': ('MYS', 'Malaysia', 101.9758, 4.2105),
    'SG': ('SGP', 'Singapore', 103.8198, 1.3521),
    'ID': ('IDN', 'Indonesia', 113.9213, -0.7893),
    'PH': ('PHL', 'Philippines', 121.7740, 12.8797),
    'BN': ('BRN', 'Brunei', 114.7277, 4.5353),
    'TL': ('TLS', 'Timor-Leste', 125.7275, -8.8742),

    # Oceania
    'AU': ('AUS', 'Australia', 133.7751, -25.2744),
    'NZ': ('NZL', 'New Zealand', 174.8860, -40.9006),
    'PG': ('PNG', 'Papua New Guinea', 143.9555, -6.3150),
    'FJ': ('FJI', 'Fiji', 179.4144, -16.5782),
    'NC': ('NCL', 'New Caledonia', 165.6180, -20.9043),
    'PF': ('PYF', 'French Polynesia', -149.4068, -17.6797),
    'WS': ('WSM', 'Samoa', -172.1046, -13.7590),
    'TO': ('TON', 'Tonga', -175.1982, -21.1790),
    'VU': ('VUT', 'Vanuatu', 166.9592, -15.3767),
    'SB': ('SLB', 'Solomon Islands', 160.1562, -9.6457),
    'GU': ('GUM', 'Guam', 144.7937, 13.4443),

    # Africa
    'EG': ('EGY', 'Egypt', 30.8025, 26.8206),
    'LY': ('LBY', 'Libya', 17.2283, 26.3351),
    'TN': ('TUN', 'Tunisia', 9.5375, 33.8869),
    'DZ': ('DZA', 'Algeria', 1.6596, 28.0339),
    'MA': ('MAR', 'Morocco', -7.0926, 31.7917),
    'SD': ('SDN', 'Sudan', 30.2176, 12.8628),
    'SS': ('SSD', 'South Sudan', 31.3070, 6.8770),
    'ET': ('ETH', 'Ethiopia', 40.4897, 9.1450),
    'ER': ('ERI', 'Eritrea', 39.7823, 15.1794),
    'DJ': ('DJI', 'Djibouti', 42.5903, 11.8251),
    'SO': ('SOM', 'Somalia', 46.1996, 5.1521),
    'KE': ('KEN', 'Kenya', 37.9062, -0.0236),
    'UG': ('UGA', 'Uganda', 32.2903, 1.3733),
    'RW': ('RWA', 'Rwanda', 29.8739, -1.9403),
    'BI': ('BDI', 'Burundi', 29.9189, -3.3731),
    'TZ': ('TZA', 'Tanzania', 34.8888, -6.3690),
    'NG': ('NGA', 'Nigeria', 8.6753, 9.0820),
    'GH': ('GHA', 'Ghana', -1.0232, 7.9465),
    'CI': ('CIV', "Cote d'Ivoire", -5.5471, 7.5400),
    'SN': ('SEN', 'Senegal', -14.4524, 14.4974),
    'GM': ('GMB', 'Gambia', -15.3101, 13.4432),
    'GN': ('GIN', 'Guinea', -9.6966, 9.9456),
    'SL': ('SLE', 'Sierra Leone', -11.7799, 8.4606),
    'LR': ('LBR', 'Liberia', -9.4295, 6.4281),
    'ML': ('MLI', 'Mali', -3.9962, 17.5707),
    'BF': ('BFA', 'Burkina Faso', -1.5616, 12.2383),
    'NE': ('NER', 'Niger', 8.0817, 17.6078),
    'TD': ('TCD', 'Chad', 18.7322, 15.4542),
    'MR': ('MRT', 'Mauritania', -10.9408, 21.0079),
    'CM': ('CMR', 'Cameroon', 12.3547, 7.3697),
    'BJ': ('BEN', 'Benin', 2.3158, 9.3077),
    'TG': ('TGO', 'Togo', 0.8248, 8.6195),
    'CF': ('CAF', 'Central African Republic', 20.9394, 6.6111),
    'GA': ('GAB', 'Gabon', 11.6094, -0.8037),
    'CG': ('COG', 'Republic of the Congo', 15.8277, -0.2280),
    'CD': ('COD', 'DR Congo', 21.7587, -4.0383),
    'AO': ('AGO', 'Angola', 17.8739, -11.2027),
    'ZM': ('ZMB', 'Zambia', 27.8493, -13.1339),
    'ZW': ('ZWE', 'Zimbabwe', 29.1549, -19.0154),
    'MW': ('MWI', 'Malawi', 34.3015, -13.2543),
    'MZ': ('MOZ', 'Mozambique', 35.5296, -18.6657),
    'MG': ('MDG', 'Madagascar', 46.8691, -18.7669),
    'MU': ('MUS', 'Mauritius', 57.5522, -20.3484),
    'NA': ('NAM', 'Namibia', 18.4904, -22.9576),
    'BW': ('BWA', 'Botswana', 24.6849, -22.3285),
    'ZA': ('ZAF', 'South Africa', 22.9375, -30.5595),
    'LS': ('LSO', 'Lesotho', 28.2336, -29.6100),
    'SZ': ('SWZ', 'Eswatini', 31.4659, -26.5225),
    'CV': ('CPV', 'Cabo Verde', -24.0132, 16.0021),
    'SC': ('SYC', 'Seychelles', 55.4920, -4.6796),
    'KM': ('COM', 'Comoros', 43.8722, -11.8750),
    'GQ': ('GNQ', 'Equatorial Guinea', 10.2679, 1.6508),
    'GW': ('GNB', 'Guinea-Bissau', -15.1804, 11.8037),
    'ST': ('STP', 'Sao Tome and Principe', 6.6131, 0.1864),
    'EH': ('ESH', 'Western Sahara', -12.8858, 24.2155),
    'RE': ('REU', 'Reunion', 55.5364, -21.1151),
    'YT': ('MYT', 'Mayotte', 45.1662, -12.8275),
    'SH': ('SHN', 'Saint Helena', -5.7089, -15.9650),
    'IO': ('IOT', 'British Indian Ocean Territory', 71.8765, -6.3432),

    # Crown dependencies & European territories
    'JE': ('JEY', 'Jersey', -2.1313, 49.2144),
    'GG': ('GGY', 'Guernsey', -2.5853, 49.4657),
    'IM': ('IMN', 'Isle of Man', -4.5481, 54.2361),
    'GI': ('GIB', 'Gibraltar', -5.3536, 36.1408),
    'FO': ('FRO', 'Faroe Islands', -6.9118, 61.8926),
    'AX': ('ALA', 'Aland Islands', 19.9156, 60.1785),
    'SJ': ('SJM', 'Svalbard and Jan Mayen', 23.6703, 77.5536),
    'VA': ('VAT', 'Vatican City', 12.4534, 41.9029),

    # Caribbean & Atlantic territories
    'AG': ('ATG', 'Antigua and Barbuda', -61.7965, 17.0608),
    'AI': ('AIA', 'Anguilla', -63.0686, 18.2206),
    'AW': ('ABW', 'Aruba', -69.9683, 12.5211),
    'BL': ('BLM', 'Saint Barthelemy', -62.8333, 17.9000),
    'BQ': ('BES', 'Caribbean Netherlands', -68.2624, 12.1784),
    'CW': ('CUW', 'Curacao', -68.9900, 12.1696),
    'DM': ('DMA', 'Dominica', -61.3710, 15.4150),
    'GD': ('GRD', 'Grenada', -61.6790, 12.1165),
    'GF': ('GUF', 'French Guiana', -53.1258, 3.9339),
    'GP': ('GLP', 'Guadeloupe', -61.5510, 16.2650),
    'KN': ('KNA', 'Saint Kitts and Nevis', -62.7830, 17.3578),
    'KY': ('CYM', 'Cayman Islands', -80.5670, 19.5135),
    'LC': ('LCA', 'Saint Lucia', -60.9789, 13.9094),
    'MF': ('MAF', 'Saint Martin', -63.0501, 18.0826),
    'MQ': ('MTQ', 'Martinique', -61.0242, 14.6415),
    'MS': ('MSR', 'Montserrat', -62.1874, 16.7425),
    'PM': ('SPM', 'Saint Pierre and Miquelon', -56.2711, 46.8852),
    'SX': ('SXM', 'Sint Maarten', -63.0548, 18.0425),
    'TC': ('TCA', 'Turks and Caicos Islands', -71.7979, 21.6940),
    'VC': ('VCT', 'Saint Vincent and the Grenadines', -61.2872, 12.9843),
    'VG': ('VGB', 'British Virgin Islands', -64.6399, 18.4207),
    'VI': ('VIR', 'U.S. Virgin Islands', -64.8963, 18.3358),
    'FK': ('FLK', 'Falkland Islands', -59.5236, -51.7963),
    'GS': ('SGS', 'South Georgia and the South Sandwich Islands', -36.5879, -54.4296),
    'BV': ('BVT', 'Bouvet Island', 3.4132, -54.4232),

    # Pacific & Indian Ocean territories
    'AS': ('ASM', 'American Samoa', -170.1322, -14.2710),
    'CC': ('CCK', 'Cocos (Keeling) Islands', 96.8710, -12.1642),
    'CK': ('COK', 'Cook Islands', -159.7777, -21.2367),
    'CX': ('CXR', 'Christmas Island', 105.6904, -10.4475),
    'FM': ('FSM', 'Micronesia', 150.5508, 7.4256),
    'KI': ('KIR', 'Kiribati', -168.7340, 1.8709),
    'MH': ('MHL', 'Marshall Islands', 171.1845, 7.1315),
    'MP': ('MNP', 'Northern Mariana Islands', 145.6739, 15.0979),
    'NF': ('NFK', 'Norfolk Island', 167.9547, -29.0408),
    'NR': ('NRU', 'Nauru', 166.9315, -0.5228),
    'NU': ('NIU', 'Niue', -169.8672, -19.0544),
    'PN': ('PCN', 'Pitcairn Islands', -127.4393, -24.7036),
    'PW': ('PLW', 'Palau', 134.5825, 7.5150),
    'TK': ('TKL', 'Tokelau', -171.8554, -9.2002),
    'TV': ('TUV', 'Tuvalu', 179.1940, -7.1095),
    'UM': ('UMI', 'U.S. Minor Outlying Islands', 166.6470, 19.2823),
    'WF': ('WLF', 'Wallis and Futuna', -177.1561, -13.7688),
    'HM': ('HMD', 'Heard Island and McDonald Islands', 73.5042, -53.0818),
    'TF': ('ATF', 'French Southern Territories', 69.3486, -49.2804),
    'AQ': ('ATA', 'Antarctica', 0.0, -75.0),
}


def get_centroid(country_id: str) -> tuple[float, float] | None:
    """Return (longitude, latitude) for an alpha-2 code, or None if unknown."""
    entry = COUNTRY_CENTROIDS.get(country_id.upper())
    if entry is None:
        return None
    return entry[2], entry[3]


def get_country_name(country_id: str) -> str:
    """Display name for an alpha-2 code, falling back to the code itself."""
    entry = COUNTRY_CENTROIDS.get(country_id.upper())
    return entry[1] if entry else country_id
