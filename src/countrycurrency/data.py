"""Compiled-in country/currency dataset.

COUNTRY_CURRENCIES holds one CountryCurrencyInfo per ISO 3166-1 alpha-2
code that has a currency, ordered by country code. Antarctica (AQ) has no
ISO 4217 currency and is omitted.

Data rules:
- Primary currency first, followed by co-circulating tender and ISO 4217
  funds codes (e.g. BOV, CLF, MXV) for the same country
- Decimals are the ISO 4217 minor unit of the primary currency
- Order is part of the contract: currency lookups resolve shared codes
  (EUR, USD, XOF, ...) to the first record listing them

Every record is validated by its constructor when this module is imported.
The tuple and the records are immutable; there is no update path.

Python 3.13+.
"""

import logging

from countrycurrency.records import CountryCurrencyInfo

__all__ = ["COUNTRY_CURRENCIES"]

logger = logging.getLogger(__name__)

COUNTRY_CURRENCIES: tuple[CountryCurrencyInfo, ...] = (
    CountryCurrencyInfo("AD", ("EUR",), 2),
    CountryCurrencyInfo("AE", ("AED",), 2),
    CountryCurrencyInfo("AF", ("AFN",), 2),
    CountryCurrencyInfo("AG", ("XCD",), 2),
    CountryCurrencyInfo("AI", ("XCD",), 2),
    CountryCurrencyInfo("AL", ("ALL",), 2),
    CountryCurrencyInfo("AM", ("AMD",), 2),
    CountryCurrencyInfo("AO", ("AOA",), 2),
    CountryCurrencyInfo("AR", ("ARS",), 2),
    CountryCurrencyInfo("AS", ("USD",), 2),
    CountryCurrencyInfo("AT", ("EUR",), 2),
    CountryCurrencyInfo("AU", ("AUD",), 2),
    CountryCurrencyInfo("AW", ("AWG",), 2),
    CountryCurrencyInfo("AX", ("EUR",), 2),
    CountryCurrencyInfo("AZ", ("AZN",), 2),
    CountryCurrencyInfo("BA", ("BAM",), 2),
    CountryCurrencyInfo("BB", ("BBD",), 2),
    CountryCurrencyInfo("BD", ("BDT",), 2),
    CountryCurrencyInfo("BE", ("EUR",), 2),
    CountryCurrencyInfo("BF", ("XOF",), 0),
    CountryCurrencyInfo("BG", ("EUR",), 2),
    CountryCurrencyInfo("BH", ("BHD",), 3),
    CountryCurrencyInfo("BI", ("BIF",), 0),
    CountryCurrencyInfo("BJ", ("XOF",), 0),
    CountryCurrencyInfo("BL", ("EUR",), 2),
    CountryCurrencyInfo("BM", ("BMD",), 2),
    CountryCurrencyInfo("BN", ("BND",), 2),
    CountryCurrencyInfo("BO", ("BOB", "BOV"), 2),
    CountryCurrencyInfo("BQ", ("USD",), 2),
    CountryCurrencyInfo("BR", ("BRL",), 2),
    CountryCurrencyInfo("BS", ("BSD",), 2),
    CountryCurrencyInfo("BT", ("BTN", "INR"), 2),
    CountryCurrencyInfo("BV", ("NOK",), 2),
    CountryCurrencyInfo("BW", ("BWP",), 2),
    CountryCurrencyInfo("BY", ("BYN",), 2),
    CountryCurrencyInfo("BZ", ("BZD",), 2),
    CountryCurrencyInfo("CA", ("CAD",), 2),
    CountryCurrencyInfo("CC", ("AUD",), 2),
    CountryCurrencyInfo("CD", ("CDF",), 2),
    CountryCurrencyInfo("CF", ("XAF",), 0),
    CountryCurrencyInfo("CG", ("XAF",), 0),
    CountryCurrencyInfo("CH", ("CHF", "CHE", "CHW"), 2),
    CountryCurrencyInfo("CI", ("XOF",), 0),
    CountryCurrencyInfo("CK", ("NZD",), 2),
    CountryCurrencyInfo("CL", ("CLP", "CLF"), 0),
    CountryCurrencyInfo("CM", ("XAF",), 0),
    CountryCurrencyInfo("CN", ("CNY",), 2),
    CountryCurrencyInfo("CO", ("COP", "COU"), 2),
    CountryCurrencyInfo("CR", ("CRC",), 2),
    CountryCurrencyInfo("CU", ("CUP",), 2),
    CountryCurrencyInfo("CV", ("CVE",), 2),
    CountryCurrencyInfo("CW", ("XCG",), 2),
    CountryCurrencyInfo("CX", ("AUD",), 2),
    CountryCurrencyInfo("CY", ("EUR",), 2),
    CountryCurrencyInfo("CZ", ("CZK",), 2),
    CountryCurrencyInfo("DE", ("EUR",), 2),
    CountryCurrencyInfo("DJ", ("DJF",), 0),
    CountryCurrencyInfo("DK", ("DKK",), 2),
    CountryCurrencyInfo("DM", ("XCD",), 2),
    CountryCurrencyInfo("DO", ("DOP",), 2),
    CountryCurrencyInfo("DZ", ("DZD",), 2),
    CountryCurrencyInfo("EC", ("USD",), 2),
    CountryCurrencyInfo("EE", ("EUR",), 2),
    CountryCurrencyInfo("EG", ("EGP",), 2),
    CountryCurrencyInfo("EH", ("MAD",), 2),
    CountryCurrencyInfo("ER", ("ERN",), 2),
    CountryCurrencyInfo("ES", ("EUR",), 2),
    CountryCurrencyInfo("ET", ("ETB",), 2),
    CountryCurrencyInfo("FI", ("EUR",), 2),
    CountryCurrencyInfo("FJ", ("FJD",), 2),
    CountryCurrencyInfo("FK", ("FKP",), 2),
    CountryCurrencyInfo("FM", ("USD",), 2),
    CountryCurrencyInfo("FO", ("DKK",), 2),
    CountryCurrencyInfo("FR", ("EUR",), 2),
    CountryCurrencyInfo("GA", ("XAF",), 0),
    CountryCurrencyInfo("GB", ("GBP",), 2),
    CountryCurrencyInfo("GD", ("XCD",), 2),
    CountryCurrencyInfo("GE", ("GEL",), 2),
    CountryCurrencyInfo("GF", ("EUR",), 2),
    CountryCurrencyInfo("GG", ("GBP",), 2),
    CountryCurrencyInfo("GH", ("GHS",), 2),
    CountryCurrencyInfo("GI", ("GIP",), 2),
    CountryCurrencyInfo("GL", ("DKK",), 2),
    CountryCurrencyInfo("GM", ("GMD",), 2),
    CountryCurrencyInfo("GN", ("GNF",), 0),
    CountryCurrencyInfo("GP", ("EUR",), 2),
    CountryCurrencyInfo("GQ", ("XAF",), 0),
    CountryCurrencyInfo("GR", ("EUR",), 2),
    CountryCurrencyInfo("GS", ("GBP",), 2),
    CountryCurrencyInfo("GT", ("GTQ",), 2),
    CountryCurrencyInfo("GU", ("USD",), 2),
    CountryCurrencyInfo("GW", ("XOF",), 0),
    CountryCurrencyInfo("GY", ("GYD",), 2),
    CountryCurrencyInfo("HK", ("HKD",), 2),
    CountryCurrencyInfo("HM", ("AUD",), 2),
    CountryCurrencyInfo("HN", ("HNL",), 2),
    CountryCurrencyInfo("HR", ("EUR",), 2),
    CountryCurrencyInfo("HT", ("HTG", "USD"), 2),
    CountryCurrencyInfo("HU", ("HUF",), 2),
    CountryCurrencyInfo("ID", ("IDR",), 2),
    CountryCurrencyInfo("IE", ("EUR",), 2),
    CountryCurrencyInfo("IL", ("ILS",), 2),
    CountryCurrencyInfo("IM", ("GBP",), 2),
    CountryCurrencyInfo("IN", ("INR",), 2),
    CountryCurrencyInfo("IO", ("USD",), 2),
    CountryCurrencyInfo("IQ", ("IQD",), 3),
    CountryCurrencyInfo("IR", ("IRR",), 2),
    CountryCurrencyInfo("IS", ("ISK",), 0),
    CountryCurrencyInfo("IT", ("EUR",), 2),
    CountryCurrencyInfo("JE", ("GBP",), 2),
    CountryCurrencyInfo("JM", ("JMD",), 2),
    CountryCurrencyInfo("JO", ("JOD",), 3),
    CountryCurrencyInfo("JP", ("JPY",), 0),
    CountryCurrencyInfo("KE", ("KES",), 2),
    CountryCurrencyInfo("KG", ("KGS",), 2),
    CountryCurrencyInfo("KH", ("KHR",), 2),
    CountryCurrencyInfo("KI", ("AUD",), 2),
    CountryCurrencyInfo("KM", ("KMF",), 0),
    CountryCurrencyInfo("KN", ("XCD",), 2),
    CountryCurrencyInfo("KP", ("KPW",), 2),
    CountryCurrencyInfo("KR", ("KRW",), 0),
    CountryCurrencyInfo("KW", ("KWD",), 3),
    CountryCurrencyInfo("KY", ("KYD",), 2),
    CountryCurrencyInfo("KZ", ("KZT",), 2),
    CountryCurrencyInfo("LA", ("LAK",), 2),
    CountryCurrencyInfo("LB", ("LBP",), 2),
    CountryCurrencyInfo("LC", ("XCD",), 2),
    CountryCurrencyInfo("LI", ("CHF",), 2),
    CountryCurrencyInfo("LK", ("LKR",), 2),
    CountryCurrencyInfo("LR", ("LRD",), 2),
    CountryCurrencyInfo("LS", ("LSL", "ZAR"), 2),
    CountryCurrencyInfo("LT", ("EUR",), 2),
    CountryCurrencyInfo("LU", ("EUR",), 2),
    CountryCurrencyInfo("LV", ("EUR",), 2),
    CountryCurrencyInfo("LY", ("LYD",), 3),
    CountryCurrencyInfo("MA", ("MAD",), 2),
    CountryCurrencyInfo("MC", ("EUR",), 2),
    CountryCurrencyInfo("MD", ("MDL",), 2),
    CountryCurrencyInfo("ME", ("EUR",), 2),
    CountryCurrencyInfo("MF", ("EUR",), 2),
    CountryCurrencyInfo("MG", ("MGA",), 2),
    CountryCurrencyInfo("MH", ("USD",), 2),
    CountryCurrencyInfo("MK", ("MKD",), 2),
    CountryCurrencyInfo("ML", ("XOF",), 0),
    CountryCurrencyInfo("MM", ("MMK",), 2),
    CountryCurrencyInfo("MN", ("MNT",), 2),
    CountryCurrencyInfo("MO", ("MOP",), 2),
    CountryCurrencyInfo("MP", ("USD",), 2),
    CountryCurrencyInfo("MQ", ("EUR",), 2),
    CountryCurrencyInfo("MR", ("MRU",), 2),
    CountryCurrencyInfo("MS", ("XCD",), 2),
    CountryCurrencyInfo("MT", ("EUR",), 2),
    CountryCurrencyInfo("MU", ("MUR",), 2),
    CountryCurrencyInfo("MV", ("MVR",), 2),
    CountryCurrencyInfo("MW", ("MWK",), 2),
    CountryCurrencyInfo("MX", ("MXN", "MXV"), 2),
    CountryCurrencyInfo("MY", ("MYR",), 2),
    CountryCurrencyInfo("MZ", ("MZN",), 2),
    CountryCurrencyInfo("NA", ("NAD", "ZAR"), 2),
    CountryCurrencyInfo("NC", ("XPF",), 0),
    CountryCurrencyInfo("NE", ("XOF",), 0),
    CountryCurrencyInfo("NF", ("AUD",), 2),
    CountryCurrencyInfo("NG", ("NGN",), 2),
    CountryCurrencyInfo("NI", ("NIO",), 2),
    CountryCurrencyInfo("NL", ("EUR",), 2),
    CountryCurrencyInfo("NO", ("NOK",), 2),
    CountryCurrencyInfo("NP", ("NPR",), 2),
    CountryCurrencyInfo("NR", ("AUD",), 2),
    CountryCurrencyInfo("NU", ("NZD",), 2),
    CountryCurrencyInfo("NZ", ("NZD",), 2),
    CountryCurrencyInfo("OM", ("OMR",), 3),
    CountryCurrencyInfo("PA", ("PAB", "USD"), 2),
    CountryCurrencyInfo("PE", ("PEN",), 2),
    CountryCurrencyInfo("PF", ("XPF",), 0),
    CountryCurrencyInfo("PG", ("PGK",), 2),
    CountryCurrencyInfo("PH", ("PHP",), 2),
    CountryCurrencyInfo("PK", ("PKR",), 2),
    CountryCurrencyInfo("PL", ("PLN",), 2),
    CountryCurrencyInfo("PM", ("EUR",), 2),
    CountryCurrencyInfo("PN", ("NZD",), 2),
    CountryCurrencyInfo("PR", ("USD",), 2),
    CountryCurrencyInfo("PS", ("ILS", "JOD"), 2),
    CountryCurrencyInfo("PT", ("EUR",), 2),
    CountryCurrencyInfo("PW", ("USD",), 2),
    CountryCurrencyInfo("PY", ("PYG",), 0),
    CountryCurrencyInfo("QA", ("QAR",), 2),
    CountryCurrencyInfo("RE", ("EUR",), 2),
    CountryCurrencyInfo("RO", ("RON",), 2),
    CountryCurrencyInfo("RS", ("RSD",), 2),
    CountryCurrencyInfo("RU", ("RUB",), 2),
    CountryCurrencyInfo("RW", ("RWF",), 0),
    CountryCurrencyInfo("SA", ("SAR",), 2),
    CountryCurrencyInfo("SB", ("SBD",), 2),
    CountryCurrencyInfo("SC", ("SCR",), 2),
    CountryCurrencyInfo("SD", ("SDG",), 2),
    CountryCurrencyInfo("SE", ("SEK",), 2),
    CountryCurrencyInfo("SG", ("SGD",), 2),
    CountryCurrencyInfo("SH", ("SHP",), 2),
    CountryCurrencyInfo("SI", ("EUR",), 2),
    CountryCurrencyInfo("SJ", ("NOK",), 2),
    CountryCurrencyInfo("SK", ("EUR",), 2),
    CountryCurrencyInfo("SL", ("SLE",), 2),
    CountryCurrencyInfo("SM", ("EUR",), 2),
    CountryCurrencyInfo("SN", ("XOF",), 0),
    CountryCurrencyInfo("SO", ("SOS",), 2),
    CountryCurrencyInfo("SR", ("SRD",), 2),
    CountryCurrencyInfo("SS", ("SSP",), 2),
    CountryCurrencyInfo("ST", ("STN",), 2),
    CountryCurrencyInfo("SV", ("USD", "SVC"), 2),
    CountryCurrencyInfo("SX", ("XCG",), 2),
    CountryCurrencyInfo("SY", ("SYP",), 2),
    CountryCurrencyInfo("SZ", ("SZL", "ZAR"), 2),
    CountryCurrencyInfo("TC", ("USD",), 2),
    CountryCurrencyInfo("TD", ("XAF",), 0),
    CountryCurrencyInfo("TF", ("EUR",), 2),
    CountryCurrencyInfo("TG", ("XOF",), 0),
    CountryCurrencyInfo("TH", ("THB",), 2),
    CountryCurrencyInfo("TJ", ("TJS",), 2),
    CountryCurrencyInfo("TK", ("NZD",), 2),
    CountryCurrencyInfo("TL", ("USD",), 2),
    CountryCurrencyInfo("TM", ("TMT",), 2),
    CountryCurrencyInfo("TN", ("TND",), 3),
    CountryCurrencyInfo("TO", ("TOP",), 2),
    CountryCurrencyInfo("TR", ("TRY",), 2),
    CountryCurrencyInfo("TT", ("TTD",), 2),
    CountryCurrencyInfo("TV", ("AUD",), 2),
    CountryCurrencyInfo("TW", ("TWD",), 2),
    CountryCurrencyInfo("TZ", ("TZS",), 2),
    CountryCurrencyInfo("UA", ("UAH",), 2),
    CountryCurrencyInfo("UG", ("UGX",), 0),
    CountryCurrencyInfo("UM", ("USD",), 2),
    CountryCurrencyInfo("US", ("USD",), 2),
    CountryCurrencyInfo("UY", ("UYU", "UYI", "UYW"), 2),
    CountryCurrencyInfo("UZ", ("UZS",), 2),
    CountryCurrencyInfo("VA", ("EUR",), 2),
    CountryCurrencyInfo("VC", ("XCD",), 2),
    CountryCurrencyInfo("VE", ("VES",), 2),
    CountryCurrencyInfo("VG", ("USD",), 2),
    CountryCurrencyInfo("VI", ("USD",), 2),
    CountryCurrencyInfo("VN", ("VND",), 0),
    CountryCurrencyInfo("VU", ("VUV",), 0),
    CountryCurrencyInfo("WF", ("XPF",), 0),
    CountryCurrencyInfo("WS", ("WST",), 2),
    CountryCurrencyInfo("YE", ("YER",), 2),
    CountryCurrencyInfo("YT", ("EUR",), 2),
    CountryCurrencyInfo("ZA", ("ZAR",), 2),
    CountryCurrencyInfo("ZM", ("ZMW",), 2),
    CountryCurrencyInfo("ZW", ("ZWG",), 2),
)

logger.debug("Loaded %d country currency records", len(COUNTRY_CURRENCIES))
