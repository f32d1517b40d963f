"""
xterm
=====

Does: Hold the 256-entry xterm palette as literal data (name, r, g, b) in index order.
Used By: `antsee.color.libraries` lookups, `Fixed` parsing/serialization, `Rgb.from_xterm_name`.
Returns: Pure data only (no side effects).

Notes:
- Entries 0-15 are the classic system colors, 16-231 the 6x6x6 cube,
  232-255 the grayscale ramp.
- Names are PascalCase and matched case-exactly.
"""

XTERM_PALETTE: tuple[tuple[str, int, int, int], ...] = (
    ("Black", 0, 0, 0),  # 0
    ("Maroon", 128, 0, 0),  # 1
    ("Green", 0, 128, 0),  # 2
    ("Olive", 128, 128, 0),  # 3
    ("Navy", 0, 0, 128),  # 4
    ("Purple", 128, 0, 128),  # 5
    ("Teal", 0, 128, 128),  # 6
    ("Silver", 192, 192, 192),  # 7
    ("Grey", 128, 128, 128),  # 8
    ("Red", 255, 0, 0),  # 9
    ("Lime", 0, 255, 0),  # 10
    ("Yellow", 255, 255, 0),  # 11
    ("Blue", 0, 0, 255),  # 12
    ("Fuchsia", 255, 0, 255),  # 13
    ("Aqua", 0, 255, 255),  # 14
    ("White", 255, 255, 255),  # 15
    ("Grey0", 0, 0, 0),  # 16
    ("DarkBlue", 0, 0, 95),  # 17
    ("DeepBlue", 0, 0, 135),  # 18
    ("RoyalBlue", 0, 0, 175),  # 19
    ("PureBlue", 0, 0, 215),  # 20
    ("PrimaryBlue", 0, 0, 255),  # 21
    ("DeepGreen", 0, 95, 0),  # 22
    ("DarkTurquoise", 0, 95, 95),  # 23
    ("DeepSeaBlue", 0, 95, 135),  # 24
    ("OceanBlue", 0, 95, 175),  # 25
    ("CeruleanBlue", 0, 95, 215),  # 26
    ("BrightBlue", 0, 95, 255),  # 27
    ("TrueGreen", 0, 135, 0),  # 28
    ("DarkSeaGreen", 0, 135, 95),  # 29
    ("DarkCyan", 0, 135, 135),  # 30
    ("TealBlue", 0, 135, 175),  # 31
    ("Cerulean", 0, 135, 215),  # 32
    ("Azure", 0, 135, 255),  # 33
    ("TrueGreen2", 0, 175, 0),  # 34
    ("Shamrock", 0, 175, 95),  # 35
    ("GreenBlue", 0, 175, 135),  # 36
    ("Turquoise", 0, 175, 175),  # 37
    ("TurquoiseBlue", 0, 175, 215),  # 38
    ("Azure2", 0, 175, 255),  # 39
    ("VibrantGreen", 0, 215, 0),  # 40
    ("TealishGreen", 0, 215, 95),  # 41
    ("AquaGreen", 0, 215, 135),  # 42
    ("Aquamarine", 0, 215, 175),  # 43
    ("AquaBlue", 0, 215, 215),  # 44
    ("NeonBlue", 0, 215, 255),  # 45
    ("BrightGreen", 0, 255, 0),  # 46
    ("MintyGreen", 0, 255, 95),  # 47
    ("TurquoiseGreen", 0, 255, 135),  # 48
    ("GreenishTurquoise", 0, 255, 175),  # 49
    ("BrightTeal", 0, 255, 215),  # 50
    ("Cyan", 0, 255, 255),  # 51
    ("DriedBlood", 95, 0, 0),  # 52
    ("RichPurple", 95, 0, 95),  # 53
    ("RoyalPurple", 95, 0, 135),  # 54
    ("VioletBlue", 95, 0, 175),  # 55
    ("BlueViolet", 95, 0, 215),  # 56
    ("BlueViolet2", 95, 0, 255),  # 57
    ("MudGreen", 95, 95, 0),  # 58
    ("Grey37", 95, 95, 95),  # 59
    ("Dusk", 95, 95, 135),  # 60
    ("Iris", 95, 95, 175),  # 61
    ("DarkPeriwinkle", 95, 95, 215),  # 62
    ("Cornflower", 95, 95, 255),  # 63
    ("OliveGreen", 95, 135, 0),  # 64
    ("DarkSage", 95, 135, 95),  # 65
    ("BlueGrey", 95, 135, 135),  # 66
    ("DustyBlue", 95, 135, 175),  # 67
    ("SoftBlue", 95, 135, 215),  # 68
    ("Cornflower2", 95, 135, 255),  # 69
    ("KermitGreen", 95, 175, 0),  # 70
    ("BoringGreen", 95, 175, 95),  # 71
    ("Tea", 95, 175, 135),  # 72
    ("Greyblue", 95, 175, 175),  # 73
    ("SoftBlue2", 95, 175, 215),  # 74
    ("SkyBlue", 95, 175, 255),  # 75
    ("FrogGreen", 95, 215, 0),  # 76
    ("LightishGreen", 95, 215, 95),  # 77
    ("SoftGreen", 95, 215, 135),  # 78
    ("SeafoamBlue", 95, 215, 175),  # 79
    ("TiffanyBlue", 95, 215, 215),  # 80
    ("RobinsEgg", 95, 215, 255),  # 81
    ("BrightLimeGreen", 95, 255, 0),  # 82
    ("LightBrightGreen", 95, 255, 95),  # 83
    ("Lightgreen", 95, 255, 135),  # 84
    ("LightGreenishBlue", 95, 255, 175),  # 85
    ("TiffanyBlue2", 95, 255, 215),  # 86
    ("RobinsEgg2", 95, 255, 255),  # 87
    ("DarkRed", 135, 0, 0),  # 88
    ("DarkMagenta", 135, 0, 95),  # 89
    ("BarneyPurple", 135, 0, 135),  # 90
    ("BarneyPurple2", 135, 0, 175),  # 91
    ("Violet", 135, 0, 215),  # 92
    ("VividPurple", 135, 0, 255),  # 93
    ("RusticBronze", 135, 95, 0),  # 94
    ("DarkMauve", 135, 95, 95),  # 95
    ("DustyPurple", 135, 95, 135),  # 96
    ("DeepLavender", 135, 95, 175),  # 97
    ("Purpley", 135, 95, 215),  # 98
    ("Purpley2", 135, 95, 255),  # 99
    ("SwampGreen", 135, 135, 0),  # 100
    ("BrownGrey", 135, 135, 95),  # 101
    ("Grey53", 135, 135, 135),  # 102
    ("BlueyGrey", 135, 135, 175),  # 103
    ("Perrywinkle", 135, 135, 215),  # 104
    ("LavenderBlue", 135, 135, 255),  # 105
    ("DarkLime", 135, 175, 0),  # 106
    ("Asparagus", 135, 175, 95),  # 107
    ("GreyishGreen", 135, 175, 135),  # 108
    ("Bluegrey", 135, 175, 175),  # 109
    ("LightGreyBlue", 135, 175, 215),  # 110
    ("CarolinaBlue", 135, 175, 255),  # 111
    ("SlimeGreen", 135, 215, 0),  # 112
    ("FreshGreen", 135, 215, 95),  # 113
    ("Lichen", 135, 215, 135),  # 114
    ("PaleTeal", 135, 215, 175),  # 115
    ("LightTeal", 135, 215, 215),  # 116
    ("Sky", 135, 215, 255),  # 117
    ("BrightLime", 135, 255, 0),  # 118
    ("LighterGreen", 135, 255, 95),  # 119
    ("EasterGreen", 135, 255, 135),  # 120
    ("Seafoam", 135, 255, 175),  # 121
    ("LightAqua", 135, 255, 215),  # 122
    ("RobinEggBlue", 135, 255, 255),  # 123
    ("DarkishRed", 175, 0, 0),  # 124
    ("VioletRed", 175, 0, 95),  # 125
    ("BarneyPurple3", 175, 0, 135),  # 126
    ("BarneyPurple4", 175, 0, 175),  # 127
    ("VibrantPurple", 175, 0, 215),  # 128
    ("BrightViolet", 175, 0, 255),  # 129
    ("OrangeyBrown", 175, 95, 0),  # 130
    ("PinkishBrown", 175, 95, 95),  # 131
    ("Mauve", 175, 95, 135),  # 132
    ("SoftPurple", 175, 95, 175),  # 133
    ("LightishPurple", 175, 95, 215),  # 134
    ("LighterPurple", 175, 95, 255),  # 135
    ("DarkMustard", 175, 135, 0),  # 136
    ("DarkSand", 175, 135, 95),  # 137
    ("Mauve2", 175, 135, 135),  # 138
    ("Grey63", 175, 135, 175),  # 139
    ("PalePurple", 175, 135, 215),  # 140
    ("Liliac", 175, 135, 255),  # 141
    ("MustardGreen", 175, 175, 0),  # 142
    ("Khaki", 175, 175, 95),  # 143
    ("Bland", 175, 175, 135),  # 144
    ("Grey69", 175, 175, 175),  # 145
    ("CloudyBlue", 175, 175, 215),  # 146
    ("PastelBlue", 175, 175, 255),  # 147
    ("Bile", 175, 215, 0),  # 148
    ("LightOlive", 175, 215, 95),  # 149
    ("PaleOliveGreen", 175, 215, 135),  # 150
    ("LightGreyGreen", 175, 215, 175),  # 151
    ("LightBlueGrey", 175, 215, 215),  # 152
    ("PowderBlue", 175, 215, 255),  # 153
    ("LemonGreen", 175, 255, 0),  # 154
    ("PaleLimeGreen", 175, 255, 95),  # 155
    ("Pistachio", 175, 255, 135),  # 156
    ("LightSeafoamGreen", 175, 255, 175),  # 157
    ("PaleTurquoise", 175, 255, 215),  # 158
    ("LightCyan", 175, 255, 255),  # 159
    ("Red2", 215, 0, 0),  # 160
    ("DarkHotPink", 215, 0, 95),  # 161
    ("Magenta", 215, 0, 135),  # 162
    ("BrightPink", 215, 0, 175),  # 163
    ("Fuchsia2", 215, 0, 215),  # 164
    ("HotPurple", 215, 0, 255),  # 165
    ("RustyOrange", 215, 95, 0),  # 166
    ("PastelRed", 215, 95, 95),  # 167
    ("Pinkish", 215, 95, 135),  # 168
    ("PaleMagenta", 215, 95, 175),  # 169
    ("PinkPurple", 215, 95, 215),  # 170
    ("BrightLilac", 215, 95, 255),  # 171
    ("Pumpkin", 215, 135, 0),  # 172
    ("DarkPeach", 215, 135, 95),  # 173
    ("DustyPink", 215, 135, 135),  # 174
    ("DullPink", 215, 135, 175),  # 175
    ("LavenderPink", 215, 135, 215),  # 176
    ("Liliac2", 215, 135, 255),  # 177
    ("Mustard", 215, 175, 0),  # 178
    ("Desert", 215, 175, 95),  # 179
    ("VeryLightBrown", 215, 175, 135),  # 180
    ("PinkishGrey", 215, 175, 175),  # 181
    ("Lavender", 215, 175, 215),  # 182
    ("LightViolet", 215, 175, 255),  # 183
    ("DirtyYellow", 215, 215, 0),  # 184
    ("DullYellow", 215, 215, 95),  # 185
    ("GreenishBeige", 215, 215, 135),  # 186
    ("Beige", 215, 215, 175),  # 187
    ("Grey84", 215, 215, 215),  # 188
    ("PaleLilac", 215, 215, 255),  # 189
    ("NeonYellow", 215, 255, 0),  # 190
    ("Pear", 215, 255, 95),  # 191
    ("LightYellowGreen", 215, 255, 135),  # 192
    ("LightLightGreen", 215, 255, 175),  # 193
    ("VeryLightGreen", 215, 255, 215),  # 194
    ("IceBlue", 215, 255, 255),  # 195
    ("BrightRed", 255, 0, 0),  # 196
    ("PinkRed", 255, 0, 95),  # 197
    ("HotPink", 255, 0, 135),  # 198
    ("BrightPink2", 255, 0, 175),  # 199
    ("HotMagenta", 255, 0, 215),  # 200
    ("BrightMagenta", 255, 0, 255),  # 201
    ("BrightOrange", 255, 95, 0),  # 202
    ("CoralPink", 255, 95, 95),  # 203
    ("WarmPink", 255, 95, 135),  # 204
    ("BubbleGumPink", 255, 95, 175),  # 205
    ("CandyPink", 255, 95, 215),  # 206
    ("VioletPink", 255, 95, 255),  # 207
    ("PumpkinOrange", 255, 135, 0),  # 208
    ("Melon", 255, 135, 95),  # 209
    ("BlushPink", 255, 135, 135),  # 210
    ("Pinky", 255, 135, 175),  # 211
    ("BubblegumPink", 255, 135, 215),  # 212
    ("PurplyPink", 255, 135, 255),  # 213
    ("OrangeYellow", 255, 175, 0),  # 214
    ("PaleOrange", 255, 175, 95),  # 215
    ("Peach", 255, 175, 135),  # 216
    ("SoftPink", 255, 175, 175),  # 217
    ("PowderPink", 255, 175, 215),  # 218
    ("LightLavendar", 255, 175, 255),  # 219
    ("SunflowerYellow", 255, 215, 0),  # 220
    ("LightGold", 255, 215, 95),  # 221
    ("Wheat", 255, 215, 135),  # 222
    ("LightPeach", 255, 215, 175),  # 223
    ("PalePink", 255, 215, 215),  # 224
    ("PaleMauve", 255, 215, 255),  # 225
    ("BrightYellow", 255, 255, 0),  # 226
    ("Canary", 255, 255, 95),  # 227
    ("PaleYellow", 255, 255, 135),  # 228
    ("Parchment", 255, 255, 175),  # 229
    ("Eggshell", 255, 255, 215),  # 230
    ("Grey100", 255, 255, 255),  # 231
    ("Grey3", 8, 8, 8),  # 232
    ("Grey7", 18, 18, 18),  # 233
    ("Grey11", 28, 28, 28),  # 234
    ("Grey15", 38, 38, 38),  # 235
    ("Grey19", 48, 48, 48),  # 236
    ("Grey23", 58, 58, 58),  # 237
    ("Grey27", 68, 68, 68),  # 238
    ("Grey30", 78, 78, 78),  # 239
    ("Grey35", 88, 88, 88),  # 240
    ("Grey39", 98, 98, 98),  # 241
    ("Grey42", 108, 108, 108),  # 242
    ("Grey46", 118, 118, 118),  # 243
    ("Grey50", 128, 128, 128),  # 244
    ("Grey54", 138, 138, 138),  # 245
    ("Grey58", 148, 148, 148),  # 246
    ("Grey62", 158, 158, 158),  # 247
    ("Grey66", 168, 168, 168),  # 248
    ("Grey70", 178, 178, 178),  # 249
    ("Grey74", 188, 188, 188),  # 250
    ("Grey78", 198, 198, 198),  # 251
    ("Grey82", 208, 208, 208),  # 252
    ("Grey85", 218, 218, 218),  # 253
    ("Grey89", 228, 228, 228),  # 254
    ("Grey93", 238, 238, 238),  # 255
)
