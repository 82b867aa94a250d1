'''
# Dangerous Dave

The attributes live in the decompressed DOS executable (the shipped one is
packed with LZEXE). Most of the strings are contiguous so only the first of
each block carries an offset.

The default high score table stores each score as five separate decimal
digits: they are exposed as a single "default.hsc.N.score" attribute.
'''
from ..attributes import Attribute
from ..core import Metadata, SimpleHandler
from ..fields import u8, u16le, stringz, fixed_string
from ..properties import DecimalDigits


FORMAT_ID = 'exe-ddave'

SIGNATURE_OFFSET = 0x1600
SIGNATURE = b'\x4f\x01\x75\x1f'


class DDaveHandler(SimpleHandler):
    attributes = [
        Attribute('sfx.highscores.show', u16le(), offset=0x8A9, value_type='sfx',
                  desc='Sound effect when high scores window appears.'),
        Attribute('sfx.highscores.entry', u16le(), offset=0x904, value_type='sfx',
                  desc='Sound effect played five times, once for each high score entry.'),
        Attribute('sfx.collect.gun', u16le(), offset=0x41A3, value_type='sfx',
                  desc='Sound effect for collecting the gun.'),
        Attribute('sfx.extralife', u16le(), offset=0xCE0, value_type='sfx',
                  desc='Sound effect for getting an extra life.'),
        Attribute('ui.label.jetpack', u16le(), offset=0x41C4, value_type='pixels',
                  desc='Vertical coordinate of "Jetpack" (clipped to status area).'),
        Attribute('game.endlevel.walkspeed', u8(), offset=0x3D82, value_type='pixels',
                  desc='How quickly the player walks across the screen in the end level cutscene.'),
        Attribute('game.endlevel.walkend', u16le(), offset=0x3D87, value_type='pixels',
                  desc='How far the player must walk across the screen in the end level cutscene.  Lower numbers end the scene earlier without having made it all the way across the screen.'),
        Attribute('game.endlevel.walk.sndtimer1', u16le(), offset=0x3D6B,
                  desc='Divisor for the timer that controls how fast the walk sound is played in the end level cutscene.'),
        Attribute('game.endlevel.walk.sndtimer2', u8(), offset=0x3D72,
                  desc='Comparison for the timer that controls how fast the walk sound is played in the end level cutscene.'),
        Attribute('game.initial.lives', u16le(), offset=0x537F, value_type='lives',
                  desc='Number of lives the player starts the game with.'),
        Attribute('game.initial.scoreL', u16le(), offset=0x5385,
                  desc='Initial score when starting a new game (low 16 bits).'),
        Attribute('game.initial.scoreH', u16le(), offset=0x538B,
                  desc='Initial score when starting a new game (high 16 bits).'),
        # stored as 0..9 but shown as 1..10
        Attribute('game.initial.level', u16le(), offset=0x53A3, value_type='level', min=1, max=10,
                  value_offset=1,
                  desc='Starting level number for a new game.'),
        Attribute('scancode.f12', u8(), offset=0x5724, value_type='scancode',
                  desc='Should be 0x58 to work properly but the game ships with 0x59, making it impossible to assign F12 to an action.'),
        Attribute('filename.scores', stringz(12), offset=0x2577E, value_type='filename',
                  desc='Filename to save high scores to.'),

        Attribute('map.state.1', u8(), offset=0x257E8,
                  desc='Initial player state bitflags for level 1.'),
        Attribute('map.state.2', u8(),
                  desc='Initial player state bitflags for level 2.'),
        Attribute('map.state.3', u8(),
                  desc='Initial player state bitflags for level 3.'),
        Attribute('map.state.4', u8(),
                  desc='Initial player state bitflags for level 4.'),
        Attribute('map.state.5', u8(),
                  desc='Initial player state bitflags for level 5.'),
        Attribute('map.state.6', u8(),
                  desc='Initial player state bitflags for level 6.'),
        Attribute('map.state.7', u8(),
                  desc='Initial player state bitflags for level 7.'),
        Attribute('map.state.8', u8(),
                  desc='Initial player state bitflags for level 8.'),
        Attribute('map.state.9', u8(),
                  desc='Initial player state bitflags for level 9.'),
        Attribute('map.state.10', u8(),
                  desc='Initial player state bitflags for level 10.'),
        Attribute('map.startX.1', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 1.'),
        Attribute('map.startX.2', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 2.'),
        Attribute('map.startX.3', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 3.'),
        Attribute('map.startX.4', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 4.'),
        Attribute('map.startX.5', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 5.'),
        Attribute('map.startX.6', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 6.'),
        Attribute('map.startX.7', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 7.'),
        Attribute('map.startX.8', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 8.'),
        Attribute('map.startX.9', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 9.'),
        Attribute('map.startX.10', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for level 10.'),
        Attribute('map.startY.1', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 1.'),
        Attribute('map.startY.2', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 2.'),
        Attribute('map.startY.3', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 3.'),
        Attribute('map.startY.4', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 4.'),
        Attribute('map.startY.5', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 5.'),
        Attribute('map.startY.6', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 6.'),
        Attribute('map.startY.7', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 7.'),
        Attribute('map.startY.8', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 8.'),
        Attribute('map.startY.9', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 9.'),
        Attribute('map.startY.10', u16le(), value_type='pixels',
                  desc='Initial player Y-coordinate for level 10.'),

        Attribute('map.startY.warp', u16le(), offset=0x1710, value_type='pixels',
                  desc='Initial player Y-coordinate for ALL warp zones.'),
        Attribute('map.state.warp', u16le(), offset=0x1716,
                  desc='Initial player state bitflags for ALL warp zones.'),

        Attribute('map.scrollX.1.warp', u16le(), offset=0x25862, value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 1.'),
        Attribute('map.scrollX.2.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 2.'),
        Attribute('map.scrollX.3.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 3.'),
        Attribute('map.scrollX.4.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 4.'),
        Attribute('map.scrollX.5.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 5.'),
        Attribute('map.scrollX.6.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 6.'),
        Attribute('map.scrollX.7.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 7.'),
        Attribute('map.scrollX.8.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 8.'),
        Attribute('map.scrollX.9.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 9.'),
        Attribute('map.scrollX.10.warp', u16le(), value_type='tiles',
                  desc='Initial horizontal scroll point for warp zone 10.'),
        Attribute('map.startX.1.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 1.'),
        Attribute('map.startX.2.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 2.'),
        Attribute('map.startX.3.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 3.'),
        Attribute('map.startX.4.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 4.'),
        Attribute('map.startX.5.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 5.'),
        Attribute('map.startX.6.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 6.'),
        Attribute('map.startX.7.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 7.'),
        Attribute('map.startX.8.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 8.'),
        Attribute('map.startX.9.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 9.'),
        Attribute('map.startX.10.warp', u16le(), value_type='pixels',
                  desc='Initial player X-coordinate for warp zone 10.'),

        Attribute('item.1.tile', u16le(), offset=0x2590A, value_type='tileIndex',
                  desc='Tile number of item 1 in map tileset.'),
        Attribute('item.2.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 2 in map tileset.'),
        Attribute('item.3.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 3 in map tileset.'),
        Attribute('item.4.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 4 in map tileset.'),
        Attribute('item.5.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 5 in map tileset.'),
        Attribute('item.6.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 6 in map tileset.'),
        Attribute('item.7.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 7 in map tileset.'),
        Attribute('item.8.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 8 in map tileset.'),
        Attribute('item.9.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 9 in map tileset.'),
        Attribute('item.10.tile', u16le(), value_type='tileIndex',
                  desc='Tile number of item 10 in map tileset.'),
        Attribute('item.1.points', u16le(),
                  desc='Points awarded by item 1.'),
        Attribute('item.2.points', u16le(),
                  desc='Points awarded by item 2.'),
        Attribute('item.3.points', u16le(),
                  desc='Points awarded by item 3.'),
        Attribute('item.4.points', u16le(),
                  desc='Points awarded by item 4.'),
        Attribute('item.5.points', u16le(),
                  desc='Points awarded by item 5.'),
        Attribute('item.6.points', u16le(),
                  desc='Points awarded by item 6.'),
        Attribute('item.7.points', u16le(),
                  desc='Points awarded by item 7.'),
        Attribute('item.8.points', u16le(),
                  desc='Points awarded by item 8.'),
        Attribute('item.9.points', u16le(),
                  desc='Points awarded by item 9.'),
        Attribute('item.10.points', u16le(),
                  desc='Points awarded by item 10.'),

        Attribute('ui.header.score', stringz(6), offset=0x25E9E),
        # the level number shown on the title screen is not covered
        Attribute('msg.level.end.1', stringz(35), offset=0x25EEA),
        Attribute('msg.level.end.9', stringz(35)),
        Attribute('msg.level.end.10', stringz(35)),

        Attribute('default.hsc.1.level', u8(),
                  desc='Level number for default high score entry 1.'),
        Attribute('default.hsc.1.digit.1', u8(),
                  desc='First digit in default high score entry 1.'),
        Attribute('default.hsc.1.digit.2', u8(),
                  desc='Second digit in default high score entry 1.'),
        Attribute('default.hsc.1.digit.3', u8(),
                  desc='Third digit in default high score entry 1.'),
        Attribute('default.hsc.1.digit.4', u8(),
                  desc='Fourth digit in default high score entry 1.'),
        Attribute('default.hsc.1.digit.5', u8(),
                  desc='Fifth digit in default high score entry 1.'),
        Attribute('default.hsc.1.name', fixed_string(3),
                  desc='Player name in default high score entry 1.'),
        Attribute('default.hsc.2.level', u8(),
                  desc='Level number for default high score entry 2.'),
        Attribute('default.hsc.2.digit.1', u8(),
                  desc='First digit in default high score entry 2.'),
        Attribute('default.hsc.2.digit.2', u8(),
                  desc='Second digit in default high score entry 2.'),
        Attribute('default.hsc.2.digit.3', u8(),
                  desc='Third digit in default high score entry 2.'),
        Attribute('default.hsc.2.digit.4', u8(),
                  desc='Fourth digit in default high score entry 2.'),
        Attribute('default.hsc.2.digit.5', u8(),
                  desc='Fifth digit in default high score entry 2.'),
        Attribute('default.hsc.2.name', fixed_string(3),
                  desc='Player name in default high score entry 2.'),
        Attribute('default.hsc.3.level', u8(),
                  desc='Level number for default high score entry 3.'),
        Attribute('default.hsc.3.digit.1', u8(),
                  desc='First digit in default high score entry 3.'),
        Attribute('default.hsc.3.digit.2', u8(),
                  desc='Second digit in default high score entry 3.'),
        Attribute('default.hsc.3.digit.3', u8(),
                  desc='Third digit in default high score entry 3.'),
        Attribute('default.hsc.3.digit.4', u8(),
                  desc='Fourth digit in default high score entry 3.'),
        Attribute('default.hsc.3.digit.5', u8(),
                  desc='Fifth digit in default high score entry 3.'),
        Attribute('default.hsc.3.name', fixed_string(3),
                  desc='Player name in default high score entry 3.'),
        Attribute('default.hsc.4.level', u8(),
                  desc='Level number for default high score entry 4.'),
        Attribute('default.hsc.4.digit.1', u8(),
                  desc='First digit in default high score entry 4.'),
        Attribute('default.hsc.4.digit.2', u8(),
                  desc='Second digit in default high score entry 4.'),
        Attribute('default.hsc.4.digit.3', u8(),
                  desc='Third digit in default high score entry 4.'),
        Attribute('default.hsc.4.digit.4', u8(),
                  desc='Fourth digit in default high score entry 4.'),
        Attribute('default.hsc.4.digit.5', u8(),
                  desc='Fifth digit in default high score entry 4.'),
        Attribute('default.hsc.4.name', fixed_string(3),
                  desc='Player name in default high score entry 4.'),
        Attribute('default.hsc.5.level', u8(),
                  desc='Level number for default high score entry 5.'),
        Attribute('default.hsc.5.digit.1', u8(),
                  desc='First digit in default high score entry 5.'),
        Attribute('default.hsc.5.digit.2', u8(),
                  desc='Second digit in default high score entry 5.'),
        Attribute('default.hsc.5.digit.3', u8(),
                  desc='Third digit in default high score entry 5.'),
        Attribute('default.hsc.5.digit.4', u8(),
                  desc='Fourth digit in default high score entry 5.'),
        Attribute('default.hsc.5.digit.5', u8(),
                  desc='Fifth digit in default high score entry 5.'),
        Attribute('default.hsc.5.name', fixed_string(3),
                  desc='Player name in default high score entry 5.'),

        Attribute('msg.hsc', stringz(22)),
        Attribute('msg.gameover', stringz(10)),
        Attribute('msg.hsc.header', stringz(55)),
        Attribute('msg.hsc.entry.eol', stringz(4),
                  desc='Printed after each high score entry to go to the next line ready for the next entry.'),
        Attribute('msg.restart', stringz(24)),
        Attribute('msg.help.1.1', stringz(26)),
        Attribute('msg.help.1.2', stringz(24)),
        Attribute('msg.help.1.3', stringz(25)),
        Attribute('msg.help.1.4', stringz(20)),
        Attribute('msg.help.1.5', stringz(25)),
        Attribute('msg.help.1.6', stringz(26)),
        Attribute('msg.help.1.7', stringz(16)),
        Attribute('msg.help.1.8', stringz(12)),
        Attribute('msg.help.1.9', stringz(21)),
        Attribute('msg.help.1.10', stringz(20)),
        Attribute('msg.help.1.11', stringz(18)),
        Attribute('msg.help.1.12', stringz(26)),
        Attribute('msg.help.1.13', stringz(22)),
        Attribute('msg.help.2.1', stringz(25)),
        Attribute('msg.help.2.2', stringz(28)),
        Attribute('msg.help.2.3', stringz(27)),
        Attribute('msg.help.2.4', stringz(28)),
        Attribute('msg.help.2.5', stringz(28)),
        Attribute('msg.help.2.6', stringz(24)),
        Attribute('msg.help.2.7', stringz(29)),
        Attribute('msg.help.2.8', stringz(29)),
        Attribute('msg.help.2.9', stringz(29)),
        Attribute('msg.help.2.10', stringz(27)),
        Attribute('msg.help.2.11', stringz(29)),
        Attribute('msg.help.2.12', stringz(29)),
        Attribute('msg.help.2.13', stringz(29)),
        Attribute('msg.help.2.14', stringz(18)),
        Attribute('msg.help.2.15', stringz(22)),
        Attribute('msg.help.3.1', stringz(25)),
        Attribute('msg.help.3.2', stringz(28)),
        Attribute('msg.help.3.3', stringz(29)),
        Attribute('msg.help.3.4', stringz(28)),
        Attribute('msg.help.3.5', stringz(29)),
        Attribute('msg.help.3.6', stringz(30)),
        Attribute('msg.help.3.7', stringz(30)),
        Attribute('msg.help.3.8', stringz(27)),
        Attribute('msg.help.3.9', stringz(15)),
        Attribute('msg.help.3.10', stringz(27)),
        Attribute('msg.help.3.11', stringz(29)),
        Attribute('msg.help.3.12', stringz(28)),
        Attribute('msg.help.3.13', stringz(17)),
        Attribute('msg.help.3.14', stringz(20)),
        Attribute('msg.quit', stringz(16)),
        Attribute('msg.pause', stringz(23)),
        Attribute('filename.gfx.ega', stringz(12)),
        Attribute('msg.title.1', stringz(22)),
        Attribute('msg.title.2', stringz(27)),
        Attribute('msg.title.3', stringz(26)),
        Attribute('msg.end.1', stringz(30)),
        Attribute('msg.end.2', stringz(37)),
        Attribute('msg.end.3', stringz(33)),
        Attribute('msg.end.4', stringz(31)),
        Attribute('msg.end.5', stringz(37)),
        Attribute('msg.end.6', stringz(36)),
        Attribute('msg.end.7', stringz(35)),
        Attribute('msg.end.8', stringz(36)),
        Attribute('msg.end.9', stringz(35)),
        Attribute('msg.end.10', stringz(23)),

        Attribute('cp.row.video', u16le(),
                  desc='Control Panel: Which row the video device selection appears on.'),
        Attribute('cp.row.sound', u16le(),
                  desc='Control Panel: Which row the sound device selection appears on.'),
        Attribute('cp.row.input', u16le(),
                  desc='Control Panel: Which row the input device selection appears on.'),
        Attribute('cp.row.unknown', u16le(),
                  desc='Control Panel: Unknown effect.'),
        Attribute('cp.col.1', u16le(),
                  desc='Control Panel: Position of first column of devices.'),
        Attribute('cp.col.2', u16le(),
                  desc='Control Panel: Position of second column of devices.'),
        Attribute('cp.col.3', u16le(),
                  desc='Control Panel: Position of third column of devices.'),
        Attribute('cp.col.4', u16le(),
                  desc='Control Panel: Position of fourth column of devices.'),
        Attribute('cp.keynames', fixed_string(128),
                  desc='Key names shown when selecting keyboard buttons.'),
        Attribute('cp.msg.joy.1', stringz(26)),
        Attribute('cp.msg.joy.2', stringz(26)),
        Attribute('cp.msg.joy.3', stringz(27)),
        Attribute('cp.msg.joy.4', stringz(13)),
        Attribute('cp.msg.joy.5', stringz(21)),
        Attribute('cp.msg.joy.6', stringz(30)),
        Attribute('cp.msg.joy.7', stringz(14)),
        Attribute('cp.msg.joy.8', stringz(21)),
        Attribute('cp.msg.mouse.1', stringz(27)),
        Attribute('cp.msg.mouse.2', stringz(27)),
        Attribute('cp.msg.mouse.3', stringz(27)),
        Attribute('cp.msg.mouse.4', stringz(27)),
        Attribute('cp.msg.mouse.5', stringz(20)),
        Attribute('cp.keyname.esc', stringz(4)),
        Attribute('cp.keyname.bksp', stringz(5)),
        Attribute('cp.keyname.tab', stringz(4)),
        Attribute('cp.keyname.ctrl', stringz(5)),
        Attribute('cp.keyname.lshift', stringz(7)),
        Attribute('cp.keyname.space', stringz(6)),
        Attribute('cp.keyname.caps', stringz(7)),
        Attribute('cp.keyname.fx', stringz(2)),
        Attribute('cp.keyname.f11', stringz(4)),
        Attribute('cp.keyname.f12', stringz(4)),
        Attribute('cp.keyname.scroll', stringz(7)),
        Attribute('cp.keyname.enter', stringz(6)),
        Attribute('cp.keyname.rshift', stringz(7)),
        Attribute('cp.keyname.prtsc', stringz(6)),
        Attribute('cp.keyname.alt', stringz(4)),
        Attribute('cp.keyname.home', stringz(5)),
        Attribute('cp.keyname.pgup', stringz(5)),
        Attribute('cp.keyname.end', stringz(4)),
        Attribute('cp.keyname.pgdn', stringz(5)),
        Attribute('cp.keyname.ins', stringz(4)),
        Attribute('cp.keyname.del', stringz(4)),
        Attribute('cp.keyname.num', stringz(6)),
        Attribute('cp.msg.keyb.1', stringz(25)),
        Attribute('cp.msg.keyb.2', stringz(23)),
        Attribute('cp.msg.keyb.3', stringz(15)),
        Attribute('cp.msg.keyb.4', stringz(15)),
        Attribute('cp.msg.keyb.5', stringz(15)),
        Attribute('cp.msg.keyb.6', stringz(15)),
        Attribute('cp.msg.keyb.7', stringz(15)),
        Attribute('cp.msg.keyb.8', stringz(15)),
        Attribute('cp.msg.keyb.9', stringz(15)),
        Attribute('cp.msg.keyb.10', stringz(15)),
        Attribute('cp.msg.keyb.11', stringz(15)),
        Attribute('cp.msg.keyb.12', stringz(15)),
        Attribute('cp.msg.keyb.13', stringz(24)),
        Attribute('cp.msg.keyb.14', stringz(21)),
        Attribute('cp.msg.keyb.15', stringz(20),
                  desc='Set after a key is chosen, erases the "Press the new key" message.'),
        Attribute('cp.msg.keyb.16', stringz(9),
                  desc='Printed after key name to erase any previous key name that was longer than the new key name.'),
        Attribute('cp.main.title', stringz(26)),
        Attribute('cp.main.video', stringz(7)),
        Attribute('cp.main.sound', stringz(7)),
        Attribute('cp.main.input', stringz(9)),
        Attribute('cp.main.footer.1', stringz(41)),
        Attribute('cp.main.footer.2', stringz(41)),
        Attribute('cp.main.footer.3', stringz(42)),
    ]

    derived = [
        DecimalDigits(
            f'default.hsc.{_}.score',
            [f'default.hsc.{_}.digit.{digit}' for digit in range(1, 6)],
            desc=f'Actual score for default high score entry {_}.',
        ) for _ in range(1, 6)
    ]

    def metadata(self):
        return Metadata(FORMAT_ID, 'Dangerous Dave')

    def identify(self, content):
        return self.identify_by_signature(content, SIGNATURE_OFFSET, SIGNATURE)
