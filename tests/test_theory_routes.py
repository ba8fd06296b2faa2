"""
Tests for the theory lookup routes.

Validates:
    - GET  /api/scales                 — full table, category filter
    - GET  /api/scales/{root}/{scale}  — spelled notes, degrees, 404s
    - GET  /api/scales/{root}/{scale}/chords — triads on every degree
    - GET  /api/chords/{symbol}        — intervals, spelled notes, rootless symbols
    - GET  /api/tunings                — presets with note names
    - GET  /api/fretboard              — grid shape, flags, bounds, custom strings
    - POST /api/progressions           — roman numerals in a key
"""

import pytest

# ---------------------------------------------------------------------------
# Scales
# ---------------------------------------------------------------------------


class TestScales:
    def test_list_all(self, client):
        resp = client.get("/api/scales")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 13
        assert data[0] == {
            "key": "ionian",
            "name": "Ionian (Major)",
            "intervals": [0, 2, 4, 5, 7, 9, 11],
            "pattern": "W-W-H-W-W-W-H",
            "category": "modes",
        }

    def test_category_filter(self, client):
        data = client.get("/api/scales", params={"category": "pentatonic"}).json()
        assert [s["key"] for s in data] == ["major-pentatonic", "minor-pentatonic"]

    def test_unknown_category(self, client):
        resp = client.get("/api/scales", params={"category": "jazz"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "unknown category 'jazz'"}

    def test_scale_info_flat_key(self, client):
        data = client.get("/api/scales/Bb/major").json()
        assert data["label"] == "Bb Ionian (Major)"
        assert data["scale"] == "ionian"
        assert data["notes"] == ["Bb", "C", "D", "Eb", "F", "G", "A"]
        assert data["degrees"] == ["R", "2", "3", "4", "5", "6", "7"]

    def test_scale_info_sharp_root_in_path(self, client):
        data = client.get("/api/scales/F%23/minor").json()
        assert data["notes"] == ["F#", "G#", "A", "B", "C#", "D", "E"]
        assert data["degrees"] == ["R", "2", "b3", "4", "5", "b6", "b7"]

    def test_scale_info_forced_spelling(self, client):
        data = client.get("/api/scales/F/major", params={"spelling": "sharps"}).json()
        assert data["notes"][3] == "A#"

    def test_unknown_root(self, client):
        resp = client.get("/api/scales/H/major")
        assert resp.status_code == 404
        assert resp.json() == {"error": "unknown root 'H'"}

    def test_unknown_scale(self, client):
        resp = client.get("/api/scales/C/bebop")
        assert resp.status_code == 404
        assert resp.json() == {"error": "unknown scale 'bebop'"}


class TestScaleChords:
    def test_major_key(self, client):
        resp = client.get("/api/scales/G/major/chords")
        assert resp.status_code == 200
        data = resp.json()
        assert data["scale"] == "ionian"
        assert [c["symbol"] for c in data["chords"]] == ["G", "Am", "Bm", "C", "D", "Em", "F#°"]
        assert data["chords"][6] == {
            "symbol": "F#°",
            "roman": "vii°",
            "degree": 6,
            "quality": "diminished",
            "notes": ["F#", "A", "C"],
        }

    def test_harmonic_minor(self, client):
        data = client.get("/api/scales/A/harmonic-minor/chords").json()
        assert data["chords"][2]["roman"] == "III+"
        assert data["chords"][2]["quality"] == "augmented"

    def test_forced_spelling(self, client):
        data = client.get("/api/scales/E/major/chords", params={"spelling": "flats"}).json()
        assert data["chords"][1]["symbol"] == "Gbm"

    def test_pentatonic_rejected(self, client):
        resp = client.get("/api/scales/A/minor-pentatonic/chords")
        assert resp.status_code == 400
        assert "harmonizing needs 7" in resp.json()["error"]

    def test_unknown_scale(self, client):
        resp = client.get("/api/scales/C/bebop/chords")
        assert resp.status_code == 404
        assert resp.json() == {"error": "unknown scale 'bebop'"}


# ---------------------------------------------------------------------------
# Chords
# ---------------------------------------------------------------------------


class TestChords:
    def test_gmaj7(self, client):
        data = client.get("/api/chords/Gmaj7").json()
        assert data == {
            "symbol": "Gmaj7",
            "root": "G",
            "quality": "major",
            "seventh": "maj7",
            "intervals": [0, 4, 7, 11],
            "notes": ["G", "B", "D", "F#"],
        }

    def test_flat_root_spelling(self, client):
        data = client.get("/api/chords/Bbm7").json()
        assert data["notes"] == ["Bb", "Db", "F", "Ab"]

    def test_half_diminished(self, client):
        data = client.get("/api/chords/Am7b5").json()
        assert data["intervals"] == [0, 3, 6, 10]
        assert data["quality"] == "half-diminished"

    def test_rootless_symbol(self, client):
        data = client.get("/api/chords/dim7").json()
        assert data["root"] is None
        assert data["intervals"] == [0, 3, 6, 9]
        assert data["notes"] == []

    def test_unknown_suffix_degrades(self, client):
        resp = client.get("/api/chords/Cxyz")
        assert resp.status_code == 200
        assert resp.json()["intervals"] == [0, 4, 7]


# ---------------------------------------------------------------------------
# Tunings / fretboard
# ---------------------------------------------------------------------------


class TestTunings:
    def test_list(self, client):
        data = client.get("/api/tunings").json()
        assert len(data) == 10
        assert data[0] == {
            "key": "standard-6",
            "name": "Standard",
            "strings": 6,
            "notes": ["E2", "A2", "D3", "G3", "B3", "E4"],
            "open_midi": [40, 45, 50, 55, 59, 64],
        }

    def test_extended_range_present(self, client):
        keys = {t["key"] for t in client.get("/api/tunings").json()}
        assert {"standard-7", "standard-8", "drop-d"} <= keys


class TestFretboard:
    def test_grid(self, client):
        resp = client.get(
            "/api/fretboard", params={"root": "A", "scale": "minor-pentatonic", "frets": 12}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["scale"] == "minor-pentatonic"
        assert data["tuning"] == "standard-6"
        assert len(data["strings"]) == 6
        assert all(len(row) == 13 for row in data["strings"])
        assert data["strings"][0][5] == {
            "fret": 5,
            "note": "A",
            "interval": "R",
            "is_root": True,
            "is_in_scale": True,
        }

    def test_defaults(self, client):
        data = client.get("/api/fretboard", params={"root": "C"}).json()
        assert data["scale"] == "ionian"
        assert data["frets"] == 12

    def test_other_tuning(self, client):
        data = client.get("/api/fretboard", params={"root": "D", "tuning": "drop-d"}).json()
        assert data["strings"][0][0]["note"] == "D"

    def test_custom_strings(self, client):
        params = {"root": "D", "strings": ["D2", "A2", "D3", "G3", "B3", "E4"]}
        data = client.get("/api/fretboard", params=params).json()
        assert data["tuning"] == "custom"
        assert len(data["strings"]) == 6
        assert data["strings"][0][0]["is_root"] is True

    def test_custom_four_string(self, client):
        params = {"root": "E", "strings": ["E1", "A1", "D2", "G2"], "frets": 5}
        data = client.get("/api/fretboard", params=params).json()
        assert [row[0]["note"] for row in data["strings"]] == ["E", "A", "D", "G"]

    @pytest.mark.parametrize(
        "strings",
        [
            ["E2", "A2", "D3"],
            ["E2", "A2", "D3", "G3", "B3", "H4"],
            ["E2", "A2", "D3", "G3", "B3", "E"],
        ],
    )
    def test_bad_custom_strings(self, client, strings):
        resp = client.get("/api/fretboard", params={"root": "C", "strings": strings})
        assert resp.status_code == 400
        assert resp.json() == {"error": "invalid strings"}

    def test_missing_root(self, client):
        resp = client.get("/api/fretboard")
        assert resp.status_code == 400
        assert resp.json() == {"error": "root is required"}

    def test_fret_bound(self, client):
        resp = client.get("/api/fretboard", params={"root": "C", "frets": 30})
        assert resp.status_code == 400
        assert resp.json() == {"error": "invalid frets"}

    def test_unknown_tuning(self, client):
        resp = client.get("/api/fretboard", params={"root": "C", "tuning": "banjo"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "unknown tuning 'banjo'"}


# ---------------------------------------------------------------------------
# Progressions
# ---------------------------------------------------------------------------


class TestProgressions:
    def test_pop_progression(self, client):
        resp = client.post(
            "/api/progressions", json={"root": "G", "numerals": ["I", "V", "vi", "IV"]}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["scale"] == "ionian"
        assert [c["symbol"] for c in data["chords"]] == ["G", "D", "Em", "C"]
        assert data["chords"][2] == {
            "symbol": "Em",
            "roman": "vi",
            "degree": 5,
            "quality": "minor",
            "notes": ["E", "G", "B"],
        }

    def test_unknown_numerals_skipped(self, client):
        data = client.post(
            "/api/progressions", json={"root": "C", "numerals": ["I", "XI", "V"]}
        ).json()
        assert [c["roman"] for c in data["chords"]] == ["I", "V"]

    def test_pentatonic_rejected(self, client):
        resp = client.post(
            "/api/progressions",
            json={"root": "C", "scale": "minor-pentatonic", "numerals": ["I"]},
        )
        assert resp.status_code == 400
        assert "progressions need 7" in resp.json()["error"]

    def test_empty_numerals(self, client):
        resp = client.post("/api/progressions", json={"root": "C", "numerals": []})
        assert resp.status_code == 400
        assert resp.json() == {"error": "invalid numerals"}

    def test_blank_numeral(self, client):
        resp = client.post("/api/progressions", json={"root": "C", "numerals": ["I", " "]})
        assert resp.status_code == 400
        assert resp.json() == {"error": "invalid numerals"}

    def test_unknown_root(self, client):
        resp = client.post("/api/progressions", json={"root": "H", "numerals": ["I"]})
        assert resp.status_code == 404
