"""Built-in demo playlist used by ``--sample`` and as a smoke-test fixture."""

from __future__ import annotations

from typing import List

from .models import Channel
from .parser.m3u_parser import parse_playlist, to_channels

SAMPLE_PLAYLIST_URL = "https://example.com/demo.m3u8"

SAMPLE_M3U_CONTENT = """\
#EXTM3U
#EXTINF:-1 tvg-id="bbc-news" tvg-name="BBC News HD" tvg-logo="https://i.imgur.com/REuN9RR.png" group-title="News",BBC News HD
https://d2vnbkvjbims7j.cloudfront.net/containerA/LTN/playlist.m3u8

#EXTINF:-1 tvg-id="cnn-int" tvg-name="CNN International" tvg-logo="https://i.imgur.com/ilZJT5s.png" group-title="News",CNN International
https://turnerlive.warnermediacdn.com/hls/live/586495/cnngo/cnn_slate/VIDEO_0_3564000.m3u8

#EXTINF:-1 tvg-id="aljazeera" tvg-name="Al Jazeera English" tvg-logo="https://i.imgur.com/7bRVpnu.png" group-title="News",Al Jazeera English
https://live-hls-web-aje.getaj.net/AJE/01.m3u8

#EXTINF:-1 tvg-id="france24" tvg-name="France 24 English" tvg-logo="https://i.imgur.com/ChzOf59.png" group-title="News",France 24 English
https://static.france24.com/live/F24_EN_LO_HLS/live_web.m3u8

#EXTINF:-1 tvg-id="dw" tvg-name="DW English" tvg-logo="https://i.imgur.com/A1xzjOI.png" group-title="News",DW English
https://dwamdstream102.akamaized.net/hls/live/2015525/dwstream102/index.m3u8

#EXTINF:-1 tvg-id="redbull" tvg-name="Red Bull TV" tvg-logo="https://i.imgur.com/TmDcIxC.png" group-title="Sports",Red Bull TV
https://rbmn-live.akamaized.net/hls/live/590964/BoRB-AT/master_928.m3u8

#EXTINF:-1 tvg-id="nasa" tvg-name="NASA TV" tvg-logo="https://i.imgur.com/PjSq1yK.png" group-title="Educational",NASA TV
https://ntv1.akamaized.net/hls/live/2014075/NASA-NTV1-HLS/master.m3u8

#EXTINF:-1 tvg-id="ftv" tvg-name="Fashion TV" tvg-logo="https://i.imgur.com/iIU9r2g.png" group-title="Lifestyle",Fashion TV
https://fashiontv-fashiontv-5-nl.samsung.wurl.tv/playlist.m3u8

#EXTINF:-1 tvg-id="bloomberg" tvg-name="Bloomberg TV" tvg-logo="https://i.imgur.com/OuogLHX.png" group-title="Business",Bloomberg TV
https://bloomberg.com/media-manifest/streams/phoenix-us.m3u8

#EXTINF:-1 tvg-id="euronews" tvg-name="Euronews" tvg-logo="https://i.imgur.com/7V012zQ.png" group-title="News",Euronews
https://rakuten-euronews-1-gb.samsung.wurl.tv/manifest/playlist.m3u8
"""


def load_sample_channels(playlist_id: int = 0) -> List[Channel]:
    return to_channels(parse_playlist(SAMPLE_M3U_CONTENT, SAMPLE_PLAYLIST_URL), playlist_id)
