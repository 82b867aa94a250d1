'''
# Nomad

Only version 1.01 of the executable is recognised: the version string is
part of the startup banner. Every attribute has an explicit offset.
'''
from ..attributes import Attribute
from ..core import Metadata, SimpleHandler
from ..fields import u8, u16le, s16le, stringz, fixed_string


FORMAT_ID = 'exe-nomad'

SIGNATURE_OFFSET = 0x30241
SIGNATURE = b'1.01'


class NomadHandler(SimpleHandler):
    attributes = [
        Attribute('planet.orbit-distance.multiplier.common', u16le(), offset=0x19DF5,
                  desc='Multiplier for the player\'s apparent orbital distance above most planets.'),
        Attribute('planet.orbit-distance.multiplier.losten', u16le(), offset=0x19DFD,
                  desc='Multiplier for the player\'s apparent orbital distance above the planet Losten.'),
        Attribute('planet.rotation-per-frame.second-harmony', s16le(), offset=0x19F7D,
                  desc='Number of angular steps through which the starbase Second Harmony rotates per frame. '
                       'A higher absolute value results in faster rotation. Negative numbers cause rotation '
                       'in the opposite direction.'),
        Attribute('text.intro.subtitles.0', stringz(80), offset=0x23DD0,
                  desc='Introductory briefing, first subtitle'),
        Attribute('text.intro.subtitles.1', stringz(64), offset=0x23E20,
                  desc='Introductory briefing, second subtitle'),
        Attribute('text.intro.subtitles.2', stringz(80), offset=0x23E60,
                  desc='Introductory briefing, third subtitle'),
        Attribute('text.intro.subtitles.3', stringz(128), offset=0x23EB0,
                  desc='Introductory briefing, fourth subtitle'),
        Attribute('text.intro.subtitles.4', stringz(48), offset=0x23F30,
                  desc='Introductory briefing, fifth subtitle'),
        Attribute('text.intro.subtitles.5', stringz(128), offset=0x23F60,
                  desc='Introductory briefing, sixth subtitle'),
        Attribute('text.intro.subtitles.6', stringz(64), offset=0x23FE0,
                  desc='Introductory briefing, seventh subtitle'),
        Attribute('text.intro.subtitles.7', stringz(48), offset=0x24020,
                  desc='Introductory briefing, eighth subtitle'),
        Attribute('text.intro.oesi-msg', stringz(53), offset=0x317EE,
                  desc='Introductory briefing, attention banner for OESI message'),
        Attribute('text.banner', stringz(49), offset=0x3023A,
                  desc='Version and timestamp startup banner'),
        Attribute('text.log.header', fixed_string(18), offset=0x32CD1,
                  desc='Header line for in-game log; CRLF will be automatically appended'),
        Attribute('filename.cfg', stringz(10), offset=0x31B34,
                  desc='Config filename'),
        Attribute('filename.save.pattern', stringz(6), offset=0x30ADE,
                  desc='Filename pattern for saved games'),
        Attribute('filename.font.large', stringz(11), offset=0x31BC2,
                  desc='Large font filename'),
        Attribute('filename.font.small', stringz(11), offset=0x31BCD,
                  desc='Small font filename'),
        Attribute('filename.gametext', stringz(13), offset=0x31BD8,
                  desc='Gametext filename'),
        Attribute('filename.3dmodel.intro-snowfield', stringz(11), offset=0x3195A,
                  desc='Filename of 3D ship model shown crashing into snow during intro sequence'),
        Attribute('filename.3dmodel.intro-earthscape', stringz(11), offset=0x3135B,
                  desc='Filename of 3D ship model shown departing Earth during intro sequence'),
        Attribute('filename.3dmodel.player-travel', stringz(11), offset=0x32A11,
                  desc='Filename of 3D ship model shown during player travel sequence'),
        Attribute('filename.dat.converse', stringz(13), offset=0x31AFE,
                  desc='CONVERSE.DAT filename'),
        Attribute('filename.dat.test', stringz(9), offset=0x31B0B,
                  desc='TEST.DAT filename'),
        Attribute('filename.dat.anim', stringz(9), offset=0x31B14,
                  desc='ANIM.DAT filename'),
        Attribute('filename.dat.samples', stringz(12), offset=0x31B1D,
                  desc='SAMPLES.DAT filename'),
        Attribute('filename.dat.invent', stringz(11), offset=0x31B29,
                  desc='INVENT.DAT filename'),
        Attribute('filename.fullscreen.end1a', stringz(6), offset=0x3126C,
                  desc='Fullscreen image filename for endgame (player\'s crashed escape pod)'),
        Attribute('filename.fullscreen.end1b', stringz(6), offset=0x31272,
                  desc='Fullscreen image filename for endgame (player\'s crashed escape pod)'),
        Attribute('filename.fullscreen.cred0001', stringz(9), offset=0x31278,
                  desc='Fullscreen image filename for credits page 1'),
        Attribute('filename.fullscreen.cred0002', stringz(9), offset=0x31281,
                  desc='Fullscreen image filename for credits page 2'),
        Attribute('filename.fullscreen.cred0003', stringz(9), offset=0x3128A,
                  desc='Fullscreen image filename for credits page 3'),
        Attribute('filename.fullscreen.cred0004', stringz(9), offset=0x31293,
                  desc='Fullscreen image filename for credits page 4'),
        Attribute('filename.fullscreen.cred0005', stringz(9), offset=0x3129C,
                  desc='Fullscreen image filename for credits page 5'),
        Attribute('filename.fullscreen.cred0006', stringz(9), offset=0x312A5,
                  desc='Fullscreen image filename for credits page 6'),
        Attribute('filename.fullscreen.getname', stringz(8), offset=0x312AE,
                  desc='Fullscreen image filename for cockpit newgame view'),
        Attribute('filename.fullscreen.open08', stringz(7), offset=0x312B6,
                  desc='Fullscreen image filename for Earthscape'),
        Attribute('filename.fullscreen.korok01', stringz(8), offset=0x312BD,
                  desc='Fullscreen image filename for endgame (Korok victory)'),
        Attribute('filename.fullscreen.korok02', stringz(8), offset=0x312C5,
                  desc='Fullscreen image filename for endgame (Korok victory)'),
        Attribute('filename.fullscreen.win01', stringz(6), offset=0x312CD,
                  desc='Fullscreen image filename for endgame (Alliance victory)'),
        Attribute('filename.fullscreen.win03', stringz(6), offset=0x312D3,
                  desc='Fullscreen image filename for endgame (Alliance victory)'),
        Attribute('filename.fullscreen.win04', stringz(6), offset=0x312D9,
                  desc='Fullscreen image filename for endgame (Alliance victory)'),
        Attribute('filename.fullscreen.cock1', stringz(10), offset=0x31901,
                  desc='Fullscreen image filename for cockpit zoom out, frame 1'),
        Attribute('filename.fullscreen.cock2', stringz(10), offset=0x3190B,
                  desc='Fullscreen image filename for cockpit zoom out, frame 2'),
        Attribute('filename.fullscreen.cock3', stringz(10), offset=0x31915,
                  desc='Fullscreen image filename for cockpit zoom out, frame 3'),
        Attribute('filename.fullscreen.cock4', stringz(10), offset=0x3191F,
                  desc='Fullscreen image filename for cockpit zoom out, frame 4'),
        Attribute('filename.fullscreen.cock5', stringz(10), offset=0x31929,
                  desc='Fullscreen image filename for cockpit zoom out, frame 5'),
        Attribute('filename.fullscreen.backg', stringz(10), offset=0x31830,
                  desc='Fullscreen image filename for title screen background'),
        Attribute('filename.fullscreen.snow', stringz(9), offset=0x31869,
                  desc='Fullscreen image filename for snowfield background'),
        Attribute('filename.fullscreen.oesi', stringz(9), offset=0x31933,
                  desc='Fullscreen image filename for OESI logo'),
        Attribute('filename.fullscreen.fixed', stringz(10), offset=0x31948,
                  desc='Fullscreen image filename for repaired ship in hangar'),
        Attribute('filename.fullscreen.crashed', stringz(12), offset=0x3193C,
                  desc='Fullscreen image filename for crashed ship in snow'),
        Attribute('filename.stamp.pscan', stringz(10), offset=0x32DFA,
                  desc='Stamp image filename for planet scan border'),
        Attribute('filename.stamp.navmap', stringz(11), offset=0x34C82,
                  desc='Stamp image filename for nav map galaxy background'),
        Attribute('filename.stamp.navbkgnd', stringz(13), offset=0x34C8D,
                  desc='Stamp image filename for nav map sector background'),
        Attribute('filename.stamp.gtek', stringz(10), offset=0x3184E,
                  desc='Stamp image filename for GameTek intro logo'),
        Attribute('filename.stamp.design', stringz(11), offset=0x31843,
                  desc='Stamp image filename for Intense! Interactive intro logo'),
        Attribute('filename.stamp.papyrus', stringz(12), offset=0x31858,
                  desc='Stamp image filename for Papyrus Design Group intro logo'),
        Attribute('filename.stamp.border', stringz(11), offset=0x318F6,
                  desc='Stamp image filename for intro briefing border'),
        Attribute('filename.stamp.guybody', stringz(12), offset=0x3188D,
                  desc='Stamp image filename for intro briefing guy'),
        Attribute('filename.stamp.sh01', stringz(9), offset=0x33095,
                  desc='Stamp image filename for ship shield, frame A'),
        Attribute('filename.stamp.sh02', stringz(9), offset=0x3309E,
                  desc='Stamp image filename for ship shield, frame B'),
        Attribute('filename.stamproll.shipst', stringz(11), offset=0x351A2,
                  desc='Stamp image filename for engineering system icons'),
        Attribute('filename.stamproll.shp', stringz(8), offset=0x33000,
                  desc='Stamp image filename for ship scan schematics'),
        Attribute('filename.stamproll.smk', stringz(8), offset=0x31885,
                  desc='Stamp image filename for snow crash animation'),
        Attribute('filename.stamproll.guyhead', stringz(12), offset=0x31899,
                  desc='Stamp image filename for intro briefing guy head animation A'),
        Attribute('filename.stamproll.guyhead2', stringz(13), offset=0x31885,
                  desc='Stamp image filename for intro briefing guy head animation B'),
        Attribute('filename.stamproll.guyturn', stringz(12), offset=0x318A5,
                  desc='Stamp image filename for intro briefing guy body animation'),
        Attribute('filename.sounds.always', stringz(7), offset=0x30465,
                  desc='Sound library filename for common effects'),
        Attribute('filename.sounds.archbot', stringz(8), offset=0x345AE,
                  desc='Sound library filename for arch-bot voice'),
        Attribute('filename.sounds.atlosten', stringz(9), offset=0x3380B,
                  desc='Sound library filename for Losten gateway effects'),
        Attribute('filename.sounds.botsend', stringz(8), offset=0x30504,
                  desc='Sound library filename for labor bot transport announcements'),
        Attribute('filename.sounds.cargo', stringz(6), offset=0x30511,
                  desc='Sound library filename for cargo stowage effects'),
        Attribute('filename.sounds.cfirst', stringz(7), offset=0x3141C,
                  desc='Sound library filename for newgame screen computer voice'),
        Attribute('filename.sounds.comlink', stringz(8), offset=0x304D7,
                  desc='Sound library filename for comlink effects'),
        Attribute('filename.sounds.end', stringz(4), offset=0x31305,
                  desc='Sound library filename for losing endgame scenario narration and effects'),
        Attribute('filename.sounds.failsafe', stringz(9), offset=0x306FD,
                  desc='Sound library filename for failsafe effects'),
        Attribute('filename.sounds.farmbot', stringz(8), offset=0x34596,
                  desc='Sound library filename for farm-bot voice'),
        Attribute('filename.sounds.fix', stringz(4), offset=0x304DF,
                  desc='Sound library filename for pending ship repair announcements'),
        Attribute('filename.sounds.fixed', stringz(6), offset=0x304E3,
                  desc='Sound library filename for completed repair announcements'),
        Attribute('filename.sounds.gasbot', stringz(7), offset=0x34587,
                  desc='Sound library filename for gas-bot voice'),
        Attribute('filename.sounds.humm', stringz(5), offset=0x31314,
                  desc='Sound library filename for static noise'),
        Attribute('filename.sounds.invnav', stringz(7), offset=0x33C3E,
                  desc='Sound library filename for nav map zoom effects'),
        Attribute('filename.sounds.land', stringz(5), offset=0x31328,
                  desc='Sound library filename for rocket / flyby effect'),
        Attribute('filename.sounds.lose', stringz(5), offset=0x31309,
                  desc='Sound library filename for losing endgame scenario narration'),
        Attribute('filename.sounds.mend', stringz(5), offset=0x31323,
                  desc='Sound library filename for end credits fanfare'),
        Attribute('filename.sounds.minebot', stringz(8), offset=0x3458E,
                  desc='Sound library filename for ore-bot voice'),
        Attribute('filename.sounds.ranchbot', stringz(9), offset=0x345A5,
                  desc='Sound library filename for ranch-bot voice'),
        Attribute('filename.sounds.planet2', stringz(8), offset=0x369AB,
                  desc='Sound library filename for labor bot landing effects'),
        Attribute('filename.sounds.scan', stringz(5), offset=0x3069B,
                  desc='Sound library filename for scanning effects'),
        Attribute('filename.sounds.shields', stringz(8), offset=0x304E9,
                  desc='Sound library filename for shield status announcements'),
        Attribute('filename.sounds.shoot1', stringz(7), offset=0x304F6,
                  desc='Sound library filename for missile status announcements'),
        Attribute('filename.sounds.shoot2', stringz(7), offset=0x304FD,
                  desc='Sound library filename for missile effects'),
        Attribute('filename.sounds.spybot', stringz(7), offset=0x3459E,
                  desc='Sound library filename for spy-bot voice'),
        Attribute('filename.sounds.talk', stringz(5), offset=0x3050C,
                  desc='Sound library filename for text and missile lock effects'),
        Attribute('filename.sounds.them', stringz(5), offset=0x304F1,
                  desc='Sound library filename for alien ship activity announcements'),
        Attribute('filename.sounds.theme', stringz(6), offset=0x312FF,
                  desc='Sound library filename for theme music'),
        Attribute('filename.sounds.timelock', stringz(9), offset=0x30531,
                  desc='Sound library filename for timelock announcements and effects'),
        Attribute('filename.sounds.warp2', stringz(6), offset=0x30517,
                  desc='Sound library filename for ships entering/leaving warp'),
        Attribute('filename.sounds.warp4', stringz(6), offset=0x329B0,
                  desc='Sound library filename for warp engine power-up/power-down effects'),
        Attribute('filename.sounds.win', stringz(4), offset=0x3131F,
                  desc='Sound library filename for winning endgame scenario narration'),
        Attribute('filename.sounds.alien.theme.altec', stringz(6), offset=0x31C8E,
                  desc='Sound library filename for Altec Hocker theme'),
        Attribute('filename.sounds.alien.theme.arden', stringz(6), offset=0x31C94,
                  desc='Sound library filename for Arden theme'),
        Attribute('filename.sounds.alien.theme.bellicosian', stringz(7), offset=0x31C9A,
                  desc='Sound library filename for Bellicosian theme'),
        Attribute('filename.sounds.alien.theme.chanticleer', stringz(8), offset=0x31CA1,
                  desc='Sound library filename for Chanticleer theme'),
        Attribute('filename.sounds.alien.theme.korok', stringz(6), offset=0x31CB1,
                  desc='Sound library filename for Korok theme'),
        Attribute('filename.sounds.alien.theme.musin', stringz(6), offset=0x31CB7,
                  desc='Sound library filename for Musin theme'),
        Attribute('filename.sounds.alien.theme.pahrump', stringz(8), offset=0x31CBD,
                  desc='Sound library filename for Pahrump theme'),
        Attribute('filename.sounds.alien.theme.phelonese', stringz(9), offset=0x31CC5,
                  desc='Sound library filename for Phelonese theme'),
        Attribute('filename.sounds.alien.theme.shaasa', stringz(7), offset=0x31CCE,
                  desc='Sound library filename for Shaasa theme'),
        Attribute('filename.sounds.alien.theme.ursor', stringz(6), offset=0x31CD5,
                  desc='Sound library filename for Ursor theme'),
        Attribute('filename.sounds.alien.speech.kenelm1', stringz(8), offset=0x31D7F,
                  desc='Sound library filename for Kenelm speech, part 1'),
        Attribute('filename.sounds.alien.speech.kenelm2', stringz(8), offset=0x31D77,
                  desc='Sound library filename for Kenelm speech, part 2'),
        Attribute('filename.sounds.alien.speech.kenelm3', stringz(8), offset=0x31DA5,
                  desc='Sound library filename for Kenelm speech, part 3'),
        Attribute('filename.sounds.alien.speech.kenelm4', stringz(8), offset=0x31DB1,
                  desc='Sound library filename for Kenelm speech, part 4'),
        Attribute('filename.sounds.extension', stringz(5), offset=0x30C41,
                  desc='Sound library filename extension'),
        Attribute('filename.table.cclass', stringz(11), offset=0x34B46,
                  desc='Communication Jammer Class Table filename'),
        Attribute('filename.table.eclass', stringz(11), offset=0x34BAA,
                  desc='Engine Class Table filename'),
        Attribute('filename.table.fact', stringz(9), offset=0x31A74,
                  desc='Fact Table filename'),
        Attribute('filename.table.invent', stringz(11), offset=0x32045,
                  desc='Inventory Table filename'),
        Attribute('filename.table.lbooster', stringz(13), offset=0x34455,
                  desc='Labor Botbooster Table filename'),
        Attribute('filename.table.lclass', stringz(11), offset=0x3444A,
                  desc='Labor Bot Class Table filename'),
        Attribute('filename.table.mclass', stringz(11), offset=0x34BCB,
                  desc='Missile Class Table filename'),
        Attribute('filename.table.msys', stringz(9), offset=0x34BD6,
                  desc='Missile Loader Table filename'),
        Attribute('filename.table.meta', stringz(9), offset=0x32479,
                  desc='Meta Table filename'),
        Attribute('filename.table.metatxt', stringz(12), offset=0x32482,
                  desc='Meta Text Table filename'),
        Attribute('filename.table.mission', stringz(12), offset=0x32578,
                  desc='Mission Table filename'),
        Attribute('filename.table.object', stringz(11), offset=0x31A24,
                  desc='Object Table filename'),
        Attribute('filename.table.pclass', stringz(11), offset=0x31A58,
                  desc='Place Class Table filename'),
        Attribute('filename.table.place', stringz(10), offset=0x31A42,
                  desc='Place Table filename'),
        Attribute('filename.table.rclass', stringz(11), offset=0x34046,
                  desc='Ship Botbooster Class Table filename'),
        Attribute('filename.table.ship', stringz(9), offset=0x34A1A,
                  desc='Ship Table filename'),
        Attribute('filename.table.scclass', stringz(12), offset=0x34C0C,
                  desc='Scanner Class Table filename'),
        Attribute('filename.table.sclass', stringz(11), offset=0x34A23,
                  desc='Ship Class Table filename'),
        Attribute('filename.table.shclass', stringz(12), offset=0x34CA2,
                  desc='Shield Class Table filename'),
        Attribute('filename.table.stclass', stringz(12), offset=0x31A4C,
                  desc='Star Class Table filename'),
        Attribute('game.restart.chocolate', u8(), offset=0x3EDF1,
                  desc='Number of chocolate bars to receive when restarting after game over'),
        Attribute('menu.timelock.save-and-exit', stringz(19), offset=0x3053A,
                  desc='Menu entry text for Timelock / Save and Exit'),
        Attribute('menu.timelock.save-and-return', stringz(24), offset=0x3054D,
                  desc='Menu entry text for Timelock / Save and Return'),
        Attribute('menu.timelock.exit-only', stringz(10), offset=0x30563,
                  desc='Menu entry text for Timelock / Exit Only'),
        Attribute('menu.timelock.return-to-game', stringz(15), offset=0x3056D,
                  desc='Menu entry text for Timelock / Return to Game'),
        Attribute('menu.gameover.rebuild', stringz(24), offset=0x30581,
                  desc='Menu entry text for Game Over / Rebuild'),
        Attribute('menu.gameover.quit', stringz(5), offset=0x30597,
                  desc='Menu entry text for Game Over / Quit'),
        Attribute('menu.ship.track-next', stringz(16), offset=0x305A0,
                  desc='Menu entry text for ship tracking / Track Next Ship'),
        Attribute('menu.ship.disregard', stringz(10), offset=0x305B0,
                  desc='Menu entry text for ship tracking / Disregard'),
        Attribute('menu.main.navigate', stringz(9), offset=0x305BE,
                  desc='Menu entry text for Main / Navigate'),
        Attribute('menu.main.scan', stringz(5), offset=0x305C7,
                  desc='Menu entry text for Main / Scan'),
        Attribute('menu.main.communicate', stringz(12), offset=0x305CC,
                  desc='Menu entry text for Main / Communicate'),
        Attribute('menu.main.combat', stringz(8), offset=0x305D8,
                  desc='Menu entry text for Main / Combat'),
        Attribute('menu.main.engineering', stringz(12), offset=0x305E0,
                  desc='Menu entry text for Main / Engineering'),
        Attribute('menu.main.inventory', stringz(10), offset=0x305EC,
                  desc='Menu entry text for Main / Inventory'),
        Attribute('menu.main.log', stringz(4), offset=0x305F6,
                  desc='Menu entry text for Main / Log'),
        Attribute('menu.main.timelock', stringz(10), offset=0x305FA,
                  desc='Menu entry text for Main / Time Lock'),
        Attribute('menu.navigate.enter-gateway', stringz(15), offset=0x3065B,
                  desc='Menu entry text for Navigate / Enter Gateway'),
        Attribute('menu.navigate.known-space', stringz(12), offset=0x3066A,
                  desc='Menu entry text for Navigate / Known Space'),
        Attribute('menu.navigate.system-map', stringz(11), offset=0x30676,
                  desc='Menu entry text for Navigate / System Map'),
        Attribute('menu.navigate.losten.select-group', stringz(16), offset=0x337F0,
                  desc='Menu entry text for Navigate / Losten Gateway / Select Grouping'),
        Attribute('menu.navigate.losten.pause', stringz(6), offset=0x33800,
                  desc='Menu entry text for Navigate / Losten Gateway / Pause'),
        Attribute('menu.navigate.losten.quit', stringz(5), offset=0x33806,
                  desc='Menu entry text for Navigate / Losten Gateway / Quit'),
        Attribute('menu.scan.ship', stringz(10), offset=0x30685,
                  desc='Menu entry text for Scan / Ship Scan'),
        Attribute('menu.scan.planet', stringz(12), offset=0x3068F,
                  desc='Menu entry text for Scan / Planet Scan'),
        Attribute('menu.communicate.altec', stringz(13), offset=0x306A0,
                  desc='Menu entry text for Communicate / Altec Hocker'),
        Attribute('menu.communicate.failsafe', stringz(20), offset=0x306AD,
                  desc='Menu entry text for Communicate / Activate Fail-Safe'),
        Attribute('menu.communicate.mayday', stringz(7), offset=0x306C1,
                  desc='Menu entry text for Communicate / Mayday'),
        Attribute('menu.communicate.planet-rep', stringz(23), offset=0x306C8,
                  desc='Menu entry text for Communicate / Planet Representative'),
        Attribute('menu.communicate.comnet', stringz(16), offset=0x306DF,
                  desc='Menu entry text for Communicate / Planet Com-Net'),
        Attribute('menu.communicate.laborbot', stringz(10), offset=0x306EF,
                  desc='Menu entry text for Communicate / Labor Bot'),
        Attribute('menu.laborbot.send', stringz(16), offset=0x307AB,
                  desc='Menu entry text for Labor Bot / Send'),
        Attribute('menu.laborbot.retrieve', stringz(15), offset=0x307BB,
                  desc='Menu entry text for Labor Bot / Retrieve'),
        Attribute('menu.engineering.status', stringz(7), offset=0x307E0,
                  desc='Menu entry text for Engineering / Status'),
        Attribute('menu.engineering.repair', stringz(7), offset=0x307E7,
                  desc='Menu entry text for Engineering / Repair'),
        Attribute('menu.conversation.ask-about', stringz(14), offset=0x31DB9,
                  desc='Menu entry text for Conversation / Ask About'),
        Attribute('menu.conversation.give-fact', stringz(20), offset=0x31DC7,
                  desc='Menu entry text for Conversation / Give Fact'),
        Attribute('menu.conversation.display-object', stringz(19), offset=0x31DDB,
                  desc='Menu entry text for Conversation / Display Object'),
        Attribute('menu.conversation.give-object', stringz(16), offset=0x31DEE,
                  desc='Menu entry text for Conversation / Give Object'),
        Attribute('menu.conversation.trade', stringz(10), offset=0x31DFE,
                  desc='Menu entry text for Conversation / Trade'),
        Attribute('menu.conversation.sign-off', stringz(9), offset=0x31E08,
                  desc='Menu entry text for Conversation / Sign Off'),
        Attribute('menu.conversation.topic.person', stringz(7), offset=0x31E14,
                  desc='Menu entry text for Conversation / Topic / Person'),
        Attribute('menu.conversation.topic.location', stringz(9), offset=0x31E1B,
                  desc='Menu entry text for Conversation / Topic / Location'),
        Attribute('menu.conversation.topic.object', stringz(7), offset=0x31E24,
                  desc='Menu entry text for Conversation / Topic / Object'),
        Attribute('menu.conversation.topic.race', stringz(5), offset=0x31E2B,
                  desc='Menu entry text for Conversation / Topic / Race'),
        Attribute('menu.conversation.trade.ask-for', stringz(11), offset=0x3237E,
                  desc='Menu entry text for Conversation / Trade / Ask For'),
        Attribute('menu.conversation.trade.offer', stringz(10), offset=0x32389,
                  desc='Menu entry text for Conversation / Trade / Offer'),
        Attribute('menu.conversation.trade.end-trading', stringz(12), offset=0x32392,
                  desc='Menu entry text for Conversation / Trade / End Trading'),
        Attribute('status.combat.escape-pod', stringz(36), offset=0x34AE9,
                  desc='Status text for escape pod jettison'),
        Attribute('status.combat.jammer', stringz(32), offset=0x34B57,
                  desc='Status text for activating jammer'),
        Attribute('status.combat.scavenge', stringz(54), offset=0x34AB3,
                  desc='Status text for scavenging terminated ship\'s inventory'),
        Attribute('status.comlink.no-response', stringz(29), offset=0x307F2,
                  desc='Status text for vessel not responding to hails'),
        Attribute('status.comlink.terminated', stringz(20), offset=0x3080F,
                  desc='Status text for com-link termination'),
        Attribute('status.engines.inop', stringz(33), offset=0x33FF2,
                  desc='Status text for inoperational engines'),
        Attribute('status.failsafe.activated', stringz(58), offset=0x30706,
                  desc='Status text for failsafe activation and MCR destruction'),
        Attribute('status.game.saved', stringz(17), offset=0x3064A,
                  desc='Status text for game saving success'),
        Attribute('status.laborbot.cargo', stringz(27), offset=0x344F8,
                  desc='Status text for labor bot cargo report (with print formatters)'),
        Attribute('status.laborbot.crash.land', stringz(56), offset=0x3449B,
                  desc='Status text for labor bot destroyed by crash landing'),
        Attribute('status.laborbot.crash.water', stringz(49), offset=0x3446A,
                  desc='Status text for labor bot destroyed by water landing'),
        Attribute('status.laborbot.landed', stringz(37), offset=0x344D3,
                  desc='Status text for labor bot successful landing'),
        Attribute('status.laborbot.no-cargo', stringz(38), offset=0x34513,
                  desc='Status text for labor bot no-cargo report'),
        Attribute('status.laborbot.no-labor-bots', stringz(24), offset=0x30793,
                  desc='Status text for insufficient labor bots'),
        Attribute('status.laborbot.no-spy-bots', stringz(22), offset=0x3077D,
                  desc='Status text for insufficient spy bots'),
        Attribute('status.laborbot.telemetry.destroyed', stringz(16), offset=0x369C8,
                  desc='Status text for labor bot telemetry, destroyed'),
        Attribute('status.laborbot.telemetry.landed', stringz(18), offset=0x369E4,
                  desc='Status text for labor bot telemetry, landed'),
        Attribute('status.laborbot.telemetry.splashdown', stringz(12), offset=0x369D8,
                  desc='Status text for labor bot telemetry, splashdown'),
        Attribute('status.losten.closed', stringz(25), offset=0x30764,
                  desc='Status text for Losten gateway being closed'),
        Attribute('status.mayday.broadcast', stringz(31), offset=0x30745,
                  desc='Status text for mayday broadcast'),
        Attribute('status.mayday.response', stringz(50), offset=0x34B77,
                  desc='Status text for mayday response'),
        Attribute('status.planet-view', stringz(29), offset=0x32A38,
                  desc='Status text for returning to the planet view'),
        Attribute('status.repair.complete', stringz(23), offset=0x3496F,
                  desc='Status text for ship system repair completion'),
        Attribute('status.repair.denied', stringz(37), offset=0x3494A,
                  desc='Status text for ship system repair denial (already at max capacity)'),
        Attribute('status.repair.start', stringz(24), offset=0x34932,
                  desc='Status text for ship system repair start'),
        Attribute('status.scanner.inop', stringz(26), offset=0x30609,
                  desc='Status text for inoperational scanner'),
        Attribute('status.travel.engage-engines', stringz(22), offset=0x32A1C,
                  desc='Status text for engaging warp engines'),
        Attribute('status.travel.establish-orbit', stringz(28), offset=0x329CF,
                  desc='Status text for establishing standard orbit'),
        Attribute('status.travel.warp-to-safety', stringz(25), offset=0x329F8,
                  desc='Status text for warping to a safe planet'),
        Attribute('status.weapon.inop', stringz(32), offset=0x3062A,
                  desc='Status text for inoperational weapons'),
        Attribute('status.gameover', stringz(10), offset=0x30B3C,
                  desc='Game Over message start'),
        Attribute('status.gameover.destroyed', stringz(25), offset=0x30B46,
                  desc='Game Over message, player\'s ship destroyed'),
        Attribute('status.gameover.wap', stringz(89), offset=0x30B5F,
                  desc='Game Over message, nonexistence of WAP revealed to Korok'),
        Attribute('status.gameover.defeat', stringz(86), offset=0x30BB8,
                  desc='Game Over message, Korok defeats alliance'),
    ]

    def metadata(self):
        return Metadata(FORMAT_ID, 'Nomad')

    def identify(self, content):
        # v1.00 has a different layout
        return self.identify_by_signature(content, SIGNATURE_OFFSET, SIGNATURE)
