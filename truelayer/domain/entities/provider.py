"""UK provider identifiers accepted by the authentication link."""

from enum import Enum


class Provider(str, Enum):
    # Groups
    UK_OPEN_BANKING_ALL = "uk-ob-all"
    UK_OAUTH_ALL = "uk-oauth-all"

    # Sandbox mock bank
    UK_MOCK = "uk-cs-mock"

    # Open Banking
    UK_ALLIED_IRISH_BANK_CORPORATE = "uk-ob-aib-gb-corporate"
    UK_BANK_OF_SCOTLAND = "uk-ob-bos"
    UK_BANK_OF_SCOTLAND_BUSINESS = "uk-ob-bos-business"
    UK_BARCLAYCARD = "uk-ob-barclaycard"
    UK_BARCLAYS = "uk-ob-barclays"
    UK_BARCLAYS_BUSINESS = "uk-ob-barclays-business"
    UK_CAPITAL_ONE = "uk-ob-capital-one"
    UK_CHELSEA_BUILDING_SOCIETY = "uk-ob-chelsea-building-society"
    UK_DANSKE_BANK = "uk-ob-danske"
    UK_DANSKE_BANK_BUSINESS = "uk-ob-danske-business"
    UK_FIRST_DIRECT = "uk-ob-first-direct"
    UK_HALIFAX = "uk-ob-halifax"
    UK_HSBC = "uk-ob-hsbc"
    UK_HSBC_BUSINESS = "uk-ob-hsbc-business"
    UK_LLOYDS = "uk-ob-lloyds"
    UK_LLOYDS_BUSINESS = "uk-ob-lloyds-business"
    UK_LLOYDS_COMMERCIAL = "uk-ob-lloyds-corporate"
    UK_MS_BANK = "uk-ob-ms"
    UK_MBNA = "uk-ob-mbna"
    UK_MONZO = "uk-ob-monzo"
    UK_NATIONWIDE = "uk-ob-nationwide"
    UK_NATWEST = "uk-ob-natwest"
    UK_NATWEST_BUSINESS = "uk-ob-natwest-business"
    UK_REVOLUT = "uk-ob-revolut"
    UK_ROYAL_BANK_OF_SCOTLAND = "uk-ob-rbs"
    UK_ROYAL_BANK_OF_SCOTLAND_BUSINESS = "uk-ob-rbs-business"
    UK_SANTANDER = "uk-ob-santander"
    UK_TESCO_BANK = "uk-ob-tesco"
    UK_TIDE = "uk-ob-tide"
    UK_TSB = "uk-ob-tsb"
    UK_ULSTER_BANK = "uk-ob-ulster"
    UK_ULSTER_BUSINESS = "uk-ob-ulster-business"
    UK_VIRGIN_MONEY = "uk-ob-virgin-money"
    UK_WISE = "uk-ob-transferwise"
    UK_YORKSHIRE_BUILDING_SOCIETY = "uk-ob-yorkshire-building-society"

    # OAuth
    UK_AMERICAN_EXPRESS = "uk-oauth-amex"
    UK_STARLING = "uk-oauth-starling"
