"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Oracle DDL for the tables used by data-access tests.
"""
# spell-checker: ignore legoset

CREATE_TABLE_LEGOSET = """
CREATE TABLE legoset (
    id          INTEGER PRIMARY KEY,
    version     INTEGER NULL,
    name        VARCHAR2(255) NOT NULL,
    manual      INTEGER NULL,
    cert        RAW(255) NULL
)"""

CREATE_TABLE_LEGOSET_WITH_ID_GENERATION = """
CREATE TABLE legoset (
    id          INTEGER GENERATED by default on null as IDENTITY PRIMARY KEY,
    version     INTEGER NULL,
    name        VARCHAR2(255) NOT NULL,
    flag        INTEGER NULL,
    manual      INTEGER NULL
)"""

CREATE_TABLE_LEGOSET_WITH_MIXED_CASE_NAMES = """
CREATE TABLE "LegoSet" (
    "Id"          INTEGER GENERATED by default on null as IDENTITY PRIMARY KEY,
    "Name"        VARCHAR2(255) NOT NULL,
    "Manual"      INTEGER NULL
)"""

DROP_TABLE_LEGOSET_WITH_MIXED_CASE_NAMES = 'DROP TABLE "LegoSet"'
