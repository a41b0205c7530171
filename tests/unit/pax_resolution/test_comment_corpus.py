"""Regression corpus of real workout posts.

Each post lists members the way people actually type them: with or
without "@", role labels, dates and head counts, and nicknames that
differ from the roster spelling."""

from __future__ import annotations

import pytest

from attendance.pax_resolution import PaxRecord, PaxResolver

MENTION_SIXTEEN = (
    "@Peacock @Clark @Mani Pedi @Rollback @SofaKing @TraLaLa @One Tree Hill @PiXAR @Jigglypuff "
    "@Gumby @Cage Free @Deuce @Top40 @Mr. Meaner @Dead End @chippendale"
)

PLAIN_SIXTEEN = (
    "Peacock Clark Mani Pedi Rollback SofaKing TraLaLa One Tree Hill PiXAR Jigglypuff "
    "Gumby Cage Free Deuce Top40 Mr. Meaner Dead End chippendale"
)

DENALI_POST = (
    "Denali 1.25.23 PAX: 15 @Herbie @Happy Tree @Doodles @Potts @Singe @Deuce @Putt Putt "
    "@Shipwreck @Clark @SofaKing @Deep Dish @Baskinz @Daffodil @Switch @ROXBURY"
)

DENALI_POST_MULTILINE = """Denali 1.25.23
                    PAX: 15
                    @Herbie @Happy Tree @Doodles @Potts @Singe @Deuce @Putt Putt @Shipwreck @Clark @SofaKing @Deep Dish @Baskinz @Daffodil @Switch @ROXBURY"""

Q_LABELLED_POST = (
    "Q: @Peacock PAX: @Spread’em @Roblox @Shipwreck @Happy Tree @gumby @Herbie @Daffodil "
    "@Richard Simmons @SweatShop - Hernan C"
)

VQ_PLAIN_POST = (
    "VQ Dead End Switch Happy Tree Daffodil Mr. Meaner Rollback Baskinz Jigglypuff Chalupa The View "
    "Singe One Tree Hill Shipwreck TraLaLa XPort Doodles Cage Free PiXAR Brady Bunch Gumby SofaKing "
    "Deep Dish Turf Toe SweatShop - Hernan C Putt Putt Peacock ROXBURY chippendale"
)


@pytest.fixture
def resolver(region_roster: list[str]) -> PaxResolver:
    return PaxResolver(region_roster)


@pytest.fixture
def label_skipping_resolver(region_roster: list[str]) -> PaxResolver:
    return PaxResolver(region_roster, skip_role_labels=True)


def split(records: list[PaxRecord]) -> tuple[list[str], list[str]]:
    official = [r.name for r in records if r.is_official]
    unofficial = [r.unknown_name for r in records if not r.is_official]
    return official, unofficial  # type: ignore[return-value]


class TestAllOfficialPosts:
    """Posts where every name is on the roster."""

    @pytest.mark.parametrize(
        ("comment", "expected_count"),
        [
            (MENTION_SIXTEEN, 16),
            (PLAIN_SIXTEEN, 16),
            (DENALI_POST, 15),
            (DENALI_POST_MULTILINE, 15),
        ],
    )
    def test_all_names_official(self, resolver: PaxResolver, comment: str, expected_count: int):
        official, unofficial = split(resolver.resolve(comment))
        assert len(official) == expected_count
        assert unofficial == []

    @pytest.mark.parametrize(
        ("comment", "expected_count"),
        [
            (Q_LABELLED_POST, 10),
            (VQ_PLAIN_POST, 28),
        ],
    )
    def test_role_labels_ignored_when_skipping(
        self, label_skipping_resolver: PaxResolver, comment: str, expected_count: int
    ):
        official, unofficial = split(label_skipping_resolver.resolve(comment))
        assert len(official) == expected_count
        assert unofficial == []

    def test_role_labels_reported_by_default(self, resolver: PaxResolver):
        official, unofficial = split(resolver.resolve(Q_LABELLED_POST))
        assert len(official) == 9
        assert unofficial == ["Peacock PAX:"]

        official, unofficial = split(resolver.resolve(VQ_PLAIN_POST))
        assert len(official) == 28
        assert unofficial == ["VQ"]

    def test_mention_and_plain_forms_agree(self, resolver: PaxResolver):
        assert resolver.resolve(MENTION_SIXTEEN) == resolver.resolve(PLAIN_SIXTEEN)

    def test_canonical_names_returned(self, resolver: PaxResolver):
        official, _ = split(resolver.resolve(DENALI_POST))
        assert official[0] == "Herbie"
        assert official[-1] == "Roxbury"
        assert "Happy Tree" in official


class TestPostsWithUnofficialNames:
    """Posts mixing members with people not on the roster."""

    @pytest.mark.parametrize(
        ("comment", "official_count", "unofficial_count", "first_unofficial"),
        [
            ("@Peacock @Clark @Mani Pedi @Newonewordguy", 3, 1, "Newonewordguy"),
            ("Peacock Clark Mani Pedi Newonewordguy", 3, 1, "Newonewordguy"),
            ("Peacock Clark Mani Pedi Super Man", 3, 2, "Super"),
            ("Peacock Peacock Peacock Clark Mani Pedi Super Man", 3, 2, "Super"),
        ],
    )
    def test_counts(
        self,
        resolver: PaxResolver,
        comment: str,
        official_count: int,
        unofficial_count: int,
        first_unofficial: str,
    ):
        official, unofficial = split(resolver.resolve(comment))
        assert len(official) == official_count
        assert len(unofficial) == unofficial_count
        assert unofficial[0] == first_unofficial

    def test_multi_word_unknown_mention_stays_whole(self, resolver: PaxResolver):
        _, unofficial = split(resolver.resolve("@Peacock @Super Man"))
        assert unofficial == ["Super Man"]


class TestSpecialNames:
    """Mention forms that differ from the roster spelling."""

    @pytest.mark.parametrize(
        ("comment", "expected_name"),
        [
            ("@Peacock", "Peacock"),
            ("@Mani Pedi", "Manny Pedi"),
            ("@Top40", "Top 40"),
            ("@Hill Billy", "Hillbilly"),
            ("Heat Check", "HeatCheck"),
            ("Linguine", "Linguini"),
            ("@2.0Glitch", "Glitch (2.0)"),
            ("@Slug Bug", "Slug Bug"),
            ("Mr. Meaner", "Mr. Meaner"),
            ("@Spread’em", "Spread'em"),
        ],
    )
    def test_single_official_record(self, resolver: PaxResolver, comment: str, expected_name: str):
        records = resolver.resolve(comment)
        assert records == [PaxRecord.official(expected_name)]
