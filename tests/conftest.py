"""
Pytest configuration and fixtures for tcxedit tests.

Provides sample TCX documents covering a minimal two-point run, a multi-lap
ride with extensions and missing optional fields, extension payloads with
mixed namespaces, and degenerate documents.
"""

import pytest

from tcxedit.processors.tcx import load


SAMPLE_TCX = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<TrainingCenterDatabase xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2">
    <Activities>
        <Activity Sport="Running">
            <Id>2025-12-07T08:48:35.000+01:00</Id>
            <Lap StartTime="2025-12-07T08:48:35.000+01:00">
                <TotalTimeSeconds>367.827</TotalTimeSeconds>
                <DistanceMeters>1000.0</DistanceMeters>
                <Calories>65</Calories>
                <Intensity>Active</Intensity>
                <TriggerMethod>Manual</TriggerMethod>
                <Track>
                    <Trackpoint>
                        <Time>2025-12-07T08:48:35.000+01:00</Time>
                        <Position>
                            <LatitudeDegrees>45.81882</LatitudeDegrees>
                            <LongitudeDegrees>9.0663</LongitudeDegrees>
                        </Position>
                        <AltitudeMeters>204.585</AltitudeMeters>
                        <DistanceMeters>0.0</DistanceMeters>
                        <HeartRateBpm>
                            <Value>100</Value>
                        </HeartRateBpm>
                    </Trackpoint>
                    <Trackpoint>
                        <Time>2025-12-07T08:48:38.000+01:00</Time>
                        <Position>
                            <LatitudeDegrees>45.81882</LatitudeDegrees>
                            <LongitudeDegrees>9.0663</LongitudeDegrees>
                        </Position>
                        <AltitudeMeters>204.585</AltitudeMeters>
                        <DistanceMeters>4.64</DistanceMeters>
                        <HeartRateBpm>
                            <Value>103</Value>
                        </HeartRateBpm>
                    </Trackpoint>
                </Track>
            </Lap>
        </Activity>
    </Activities>
</TrainingCenterDatabase>"""


# Lap 1: four points, lap 2: two points, lap 3: no track
MULTI_LAP_TCX = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
    xmlns:ns3="http://www.garmin.com/xmlschemas/ActivityExtension/v2">
  <Activities>
    <Activity Sport="Biking">
      <Id>2024-05-01T10:00:00Z</Id>
      <Lap StartTime="2024-05-01T10:00:00Z">
        <TotalTimeSeconds>30.0</TotalTimeSeconds>
        <DistanceMeters>150.0</DistanceMeters>
        <Calories>12</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
        <Track>
          <Trackpoint>
            <Time>2024-05-01T10:00:00Z</Time>
            <Position>
              <LatitudeDegrees>47.1</LatitudeDegrees>
              <LongitudeDegrees>8.5</LongitudeDegrees>
            </Position>
            <AltitudeMeters>400.0</AltitudeMeters>
            <DistanceMeters>0.0</DistanceMeters>
            <HeartRateBpm><Value>120</Value></HeartRateBpm>
            <Cadence>80</Cadence>
            <Extensions>
              <ns3:TPX>
                <ns3:Speed>5.0</ns3:Speed>
              </ns3:TPX>
            </Extensions>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-01T10:00:10Z</Time>
            <AltitudeMeters>402.5</AltitudeMeters>
            <DistanceMeters>50.0</DistanceMeters>
            <HeartRateBpm><Value>130</Value></HeartRateBpm>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-01T10:00:20.500Z</Time>
            <AltitudeMeters>401.0</AltitudeMeters>
            <DistanceMeters>100.0</DistanceMeters>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-01T10:00:30Z</Time>
            <AltitudeMeters>405.0</AltitudeMeters>
            <DistanceMeters>150.0</DistanceMeters>
            <HeartRateBpm><Value>140</Value></HeartRateBpm>
          </Trackpoint>
        </Track>
      </Lap>
      <Lap StartTime="2024-05-01T10:00:30Z">
        <TotalTimeSeconds>20.0</TotalTimeSeconds>
        <DistanceMeters>90.0</DistanceMeters>
        <Calories>8</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Distance</TriggerMethod>
        <Track>
          <Trackpoint>
            <Time>2024-05-01T10:00:40Z</Time>
            <AltitudeMeters>403.0</AltitudeMeters>
            <DistanceMeters>40.0</DistanceMeters>
            <HeartRateBpm><Value>150</Value></HeartRateBpm>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-01T10:00:50Z</Time>
            <DistanceMeters>90.0</DistanceMeters>
            <HeartRateBpm><Value>145</Value></HeartRateBpm>
          </Trackpoint>
        </Track>
      </Lap>
      <Lap StartTime="2024-05-01T10:01:00Z">
        <TotalTimeSeconds>5.0</TotalTimeSeconds>
        <DistanceMeters>0.0</DistanceMeters>
        <Calories>0</Calories>
        <Intensity>Resting</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
"""


BAD_TIME_TCX = """<TrainingCenterDatabase>
  <Activities>
    <Activity Sport="Other">
      <Id>sometime</Id>
      <Lap StartTime="sometime">
        <TotalTimeSeconds>99.0</TotalTimeSeconds>
        <DistanceMeters>10.0</DistanceMeters>
        <Calories>3</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
        <Track>
          <Trackpoint>
            <Time>not-a-time</Time>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-01T10:00:05Z</Time>
            <DistanceMeters>7.5</DistanceMeters>
          </Trackpoint>
        </Track>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>"""


EMPTY_TRACK_TCX = """<TrainingCenterDatabase>
  <Activities>
    <Activity Sport="Running">
      <Id>2024-01-01T00:00:00Z</Id>
      <Lap StartTime="2024-01-01T00:00:00Z">
        <TotalTimeSeconds>0.0</TotalTimeSeconds>
        <DistanceMeters>0.0</DistanceMeters>
        <Calories>0</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
        <Track/>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>"""


# Extension payloads mixing no-namespace, default-namespace and prefixed elements
EXTENSIONS_TCX = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
    xmlns:ns3="http://www.garmin.com/xmlschemas/ActivityExtension/v2">
  <Activities>
    <Activity Sport="Running">
      <Id>2024-06-01T07:00:00Z</Id>
      <Lap StartTime="2024-06-01T07:00:00Z">
        <TotalTimeSeconds>2.0</TotalTimeSeconds>
        <DistanceMeters>6.0</DistanceMeters>
        <Calories>1</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
        <Track>
          <Trackpoint>
            <Time>2024-06-01T07:00:00Z</Time>
            <Extensions><Foo xmlns=""><Bar/></Foo></Extensions>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-06-01T07:00:01Z</Time>
            <Extensions>
              <TPX xmlns="http://www.garmin.com/xmlschemas/ActivityExtension/v2"><Speed>3.0</Speed></TPX>
            </Extensions>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-06-01T07:00:02Z</Time>
            <Extensions><ns3:TPX><Note xmlns="" xml:lang="en">a &amp; b</Note></ns3:TPX></Extensions>
          </Trackpoint>
        </Track>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>"""


NO_ACTIVITIES_TCX = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase><Activities/></TrainingCenterDatabase>"""


@pytest.fixture
def sample_tcx():
    return SAMPLE_TCX


@pytest.fixture
def multi_lap_tcx():
    return MULTI_LAP_TCX


@pytest.fixture
def bad_time_tcx():
    return BAD_TIME_TCX


@pytest.fixture
def empty_track_tcx():
    return EMPTY_TRACK_TCX


@pytest.fixture
def no_activities_tcx():
    return NO_ACTIVITIES_TCX


@pytest.fixture
def extensions_tcx():
    return EXTENSIONS_TCX


@pytest.fixture
def sample_document():
    return load(SAMPLE_TCX)


@pytest.fixture
def multi_lap_document():
    return load(MULTI_LAP_TCX)


@pytest.fixture(params=[SAMPLE_TCX, MULTI_LAP_TCX, BAD_TIME_TCX, EMPTY_TRACK_TCX, NO_ACTIVITIES_TCX,
                EXTENSIONS_TCX],
                ids=["sample", "multi_lap", "bad_time", "empty_track", "no_activities",
                     "extensions"])
def any_tcx(request):
    """Every well-formed sample document"""
    return request.param
